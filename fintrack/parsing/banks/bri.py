from ..extractors.generic import GenericRowParser


class BRIParser(GenericRowParser):
    """BRI exports have no dedicated layout yet; rows go through the generic heuristics."""
    bank_name = 'BRI'
