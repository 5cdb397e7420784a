from ..extractors.generic import GenericRowParser


class BNIParser(GenericRowParser):
    """BNI exports have no dedicated layout yet; rows go through the generic heuristics."""
    bank_name = 'BNI'
