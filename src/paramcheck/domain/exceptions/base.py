"""Base exceptions for paramcheck domain."""


class ParamCheckError(Exception):
    """Root exception for all paramcheck errors.

    All domain exceptions inherit from this.
    Allows: except ParamCheckError to catch all library errors.
    """
