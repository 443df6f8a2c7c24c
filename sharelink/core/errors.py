class LinkError(ValueError):
    """Base class for every failure raised while marshalling or parsing a link."""

    code = "link_error"
    default_message = "link error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class MissingInputError(LinkError):
    code = "missing_input"
    default_message = "missing input"


class InvalidInputError(LinkError):
    code = "invalid_input"
    default_message = "invalid input"


class DecodeError(InvalidInputError):
    """Text contains a character outside the codec alphabet."""

    default_message = "invalid base-N text"
