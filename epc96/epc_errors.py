__all__ = [
    # Exceptions
    "EPCError",
    "FormatError",
    "ValidationError",
    "RangeError",
    "LayoutError",
    "PartitionError",
    "UnsupportedPartitionError",
    "PartitionMismatchError",
    "UnsupportedPrefixLengthError",
    "CheckDigitMismatchError",
    "UnsupportedHeaderError",
]


class EPCError(Exception):
    pass


class FormatError(EPCError):
    pass


class ValidationError(EPCError):
    pass


class RangeError(EPCError):
    pass


class LayoutError(EPCError):
    """Field list handed to the register builder is malformed.

    This is a bug in a codec layout, never a problem with user input.
    """
    pass


class PartitionError(EPCError):
    pass


class UnsupportedPartitionError(PartitionError):
    def __init__(self, partition):
        self.partition = partition
        super(UnsupportedPartitionError, self).__init__(
            'Unsupported SGTIN-96 partition {}'.format(partition))


class PartitionMismatchError(PartitionError):
    def __init__(self, partition, expected, actual):
        self.partition = partition
        self.expected = expected
        self.actual = actual
        super(PartitionMismatchError, self).__init__(
            'Partition {} expects company prefix length {}, got {}'.format(
                partition, expected, actual))


class UnsupportedPrefixLengthError(PartitionError):
    def __init__(self, length):
        self.length = length
        super(UnsupportedPrefixLengthError, self).__init__(
            'Unsupported company prefix length {} for SGTIN-96'.format(length))


class CheckDigitMismatchError(ValidationError):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super(CheckDigitMismatchError, self).__init__(
            'UPC check digit mismatch: expected {}, got {}'.format(
                expected, actual))


class UnsupportedHeaderError(EPCError):
    def __init__(self, header):
        self.header = header
        super(UnsupportedHeaderError, self).__init__(
            'Unsupported EPC header 0x{:02X}'.format(header))
