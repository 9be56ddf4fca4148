import numpy as np
import time

#https://rosettacode.org/wiki/Pseudo-random_numbers/Splitmix64
class ArrayRandom:
	"""
		Splitmix64 vectorized noise source for dithering.
		Same seed gives the same stream regardless of how the draws are batched.
		If no seed is given, one is derived from the clock.
	"""
	MASK = 2**64-1

	FLOAT_MASK = np.uint64(1023) << np.uint64(52)
	GAMMA = np.uint64(0x9e3779b97f4a7c15)
	MUL1 = np.uint64(0xbf58476d1ce4e5b9)
	MUL2 = np.uint64(0x94d049bb133111eb)

	def __init__(self, seed = None):
		if seed is None:
			seed = time.perf_counter_ns() ^ time.time_ns()
		elif isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
			raise ValueError("seed must be int, got "+type(seed).__name__)
		self._seed = int(seed) & self.MASK
		self._state = np.uint64(self._seed)

	@property
	def seed(self):
		"""Pass to a new ArrayRandom to replay the same noise"""
		return self._seed

	@staticmethod
	def _mix(z):
		#overflow is intended, numpy wraps uint64 in place
		z ^= z >> np.uint64(30)
		z *= ArrayRandom.MUL1
		z ^= z >> np.uint64(27)
		z *= ArrayRandom.MUL2
		z ^= z >> np.uint64(31)
		return z

	def randomInt(self, shape: tuple):
		"""uint64[shape] randomInt(tuple shape)"""
		count = int(np.prod(shape, dtype=np.int64))
		if count <= 0:
			return np.zeros(shape, dtype=np.uint64)

		with np.errstate(over="ignore"):
			rand_arr = np.arange(1, count+1, dtype=np.uint64) #n=1,2,3...
			rand_arr *= self.GAMMA
			rand_arr += self._state
			rand_arr = self._mix(rand_arr)
			self._state = np.uint64((int(self._state) + int(self.GAMMA) * count) & self.MASK)

		return rand_arr.reshape(shape)

	def random(self, shape: tuple):
		"""float64[shape] random(tuple shape) in [0,1)"""
		bits = (self.randomInt(shape) >> np.uint64(12)) | self.FLOAT_MASK
		return bits.view(np.float64) - 1.0
