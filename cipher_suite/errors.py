"""Exception types raised by the cipher suite codec."""


class CipherSuiteError(Exception):
    """Base class for cipher suite name/key conversion failures."""
    pass


class UnknownFragment(CipherSuiteError):
    """A name token does not match any dictionary fragment."""
    pass


class MalformedName(CipherSuiteError):
    """Name has more fields than a suite key can hold."""
    pass


class CorruptKey(CipherSuiteError):
    """Suite key references a fragment index outside the dictionary."""
    pass


class NameTooLong(CipherSuiteError):
    """Reconstructed name does not fit the requested length."""
    pass
