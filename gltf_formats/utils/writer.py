import io
import struct


class BinaryWriter(object):

	def __init__(self, stream=None):
		if stream is None:
			self.stream = io.BytesIO()
		elif isinstance(stream, bytes):
			self.stream = io.BytesIO(stream)
		else:
			self.stream = stream

	def tell(self):
		return self.stream.tell()

	def write_bytes(self, value):
		return self.stream.write(value)

	def pack(self, fmt, *data):
		return self.write_bytes(struct.pack(fmt, *data))

	def pad(self, alignment, value=b'\x00'):
		remainder = self.tell() % alignment
		if remainder:
			return self.write_bytes(value * (alignment - remainder))
		return 0

	def write_float(self, value, endian='<'):
		return self.pack(f'{endian}f', value)

	def write_uint8(self, value, endian='<'):
		return self.pack(f'{endian}B', value)

	def write_uint16(self, value, endian='<'):
		return self.pack(f'{endian}H', value)

	def write_uint32(self, value, endian='<'):
		return self.pack(f'{endian}I', value)

	def write_vec2(self, value, endian='<'):
		return self.pack(f'{endian}2f', *value)

	def write_vec3(self, value, endian='<'):
		return self.pack(f'{endian}3f', *value)

	def write_vec4(self, value, endian='<'):
		return self.pack(f'{endian}4f', *value)

	def write_elements(self, values, fmt, endian='<'):
		"""
		Packs a homogeneous sequence, where every element is either a scalar
		or a tuple matching the component count of `fmt` (e.g. `3f`).
		"""
		size = 0
		for value in values:
			if isinstance(value, (tuple, list)):
				size += self.pack(f'{endian}{fmt}', *value)
			else:
				size += self.pack(f'{endian}{fmt}', value)
		return size
