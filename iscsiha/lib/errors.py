class LibraryError(Exception):
    """
    A library command failed, args hold the report items describing why
    """


class ValidationError(LibraryError):
    """
    Caller input is malformed, nothing has been run
    """


class RemoteQueryError(LibraryError):
    """
    A cluster manager command could not be run or exited with an error
    """


class ParsingError(RemoteQueryError):
    """
    A cluster manager command succeeded but its output is not usable
    """


class ResolutionError(LibraryError):
    """
    A group, its members or a resource could not be found
    """


class InactiveGroupError(LibraryError):
    """
    It is not possible to tell which node runs a group
    """
