class BmfontError(Exception):
    pass


class DecodeError(BmfontError):
    """Raised when a BMFont line can't be decoded

    Attributes:
        header (str): Header tag of the line, if known
        field (str): Name of the faulty field, if any
        line (str): Content of the line
        lineno (int): 1-based line number, None for a standalone line
    """
    def __init__(self, message, header=None, field=None, line=None,
                 lineno=None):
        super().__init__(message)
        self.message = message
        self.header = header
        self.field = field
        self.line = line
        self.lineno = lineno

    def __str__(self):
        parts = [self.message]
        if self.lineno is not None:
            parts.append("line %d" % self.lineno)
        if self.header is not None:
            parts.append("header '%s'" % self.header)
        if self.field is not None:
            parts.append("field '%s'" % self.field)
        if self.line is not None:
            parts.append("content %r" % self.line)
        return ' :: '.join(parts)


class MalformedLine(DecodeError):
    pass


class MissingField(DecodeError):
    pass


class TypeConversionError(DecodeError):
    pass


class PageIndexError(DecodeError):
    pass


class IOFailure(BmfontError):
    pass
