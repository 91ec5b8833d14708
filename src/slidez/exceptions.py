class SlidezError(Exception):
    pass


class DocumentParseError(SlidezError):
    pass


class DeckImportError(SlidezError):
    pass


class DocumentSerializeError(SlidezError):
    pass
