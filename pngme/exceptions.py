class PngmeException(Exception):
    '''Base class to extend in order to throw exception in pngme.

    It takes a single argument that represents the chain of the elements that
    caused the exception (e.g. ['chunks[3]']).
    '''

    def __init__(self, chain=None, message=''):
        self.chain = chain if chain is not None else []
        self.message = message
        super().__init__(message)

    def __str__(self):
        if not self.chain:
            return self.message

        return '%s: %s' % ('.'.join(self.chain), self.message)


class MalformedInputException(PngmeException):
    pass


class MagicException(MalformedInputException):
    '''The PNG signature is missing or wrong.'''
    pass


class InvalidTypeException(PngmeException):

    def __init__(self, value, chain=None, message=None):
        self.value = value
        super().__init__(chain=chain, message=message or f'invalid chunk type {value!r}')


class CRCException(PngmeException):
    '''The CRC stored in the chunk doesn't match the one computed over type and data.'''

    def __init__(self, expected, actual, chain=None):
        self.expected = expected
        self.actual = actual
        super().__init__(chain=chain, message=f'CRC mismatch: stored 0x{expected:08x}, computed 0x{actual:08x}')


class NotFoundException(PngmeException):

    def __init__(self, chunk_type, chain=None):
        self.chunk_type = chunk_type
        super().__init__(chain=chain, message=f'no chunk with type {chunk_type}')


class EncodingException(PngmeException):

    def __init__(self, error, chain=None):
        self.error = error
        super().__init__(chain=chain, message=f'chunk data is not valid UTF-8 ({error})')
