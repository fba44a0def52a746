import os
import io
import struct


class BinaryReader(object):

	def __init__(self, stream):
		if isinstance(stream, (bytes, bytearray)):
			self.stream = io.BytesIO(stream)
		else:
			self.stream = stream

	def seek(self, offset, whence=os.SEEK_SET):
		return self.stream.seek(offset, whence)

	def tell(self):
		return self.stream.tell()

	def unpack(self, fmt, length=1):
		return struct.unpack(fmt, self.stream.read(length))

	def read_bytes(self, length):
		return self.stream.read(length)

	def read_float(self, endian='<'):
		return self.unpack(f'{endian}f', 4)[0]

	def read_uint8(self, endian='<'):
		return self.unpack(f'{endian}B')[0]

	def read_uint16(self, endian='<'):
		return self.unpack(f'{endian}H', 2)[0]

	def read_uint32(self, endian='<'):
		return self.unpack(f'{endian}I', 4)[0]

	def read_vec2(self, endian='<'):
		return self.unpack(f'{endian}2f', 8)

	def read_vec3(self, endian='<'):
		return self.unpack(f'{endian}3f', 12)

	def read_vec4(self, endian='<'):
		return self.unpack(f'{endian}4f', 16)

	def read_elements(self, count, fmt, endian='<'):
		"""
		Reads `count` elements packed with `fmt`. Single-component formats
		yield plain values, everything else yields tuples.
		"""
		size = struct.calcsize(f'{endian}{fmt}')
		elements = []
		for _ in range(count):
			value = self.unpack(f'{endian}{fmt}', size)
			elements.append(value[0] if len(value) == 1 else value)
		return elements
