"""Base service class for domain services."""


class Service:
    """Marker base for domain services.

    Services own the rules that span entities: vote toggling over any
    votable item, reply nesting under an answer, acceptance across the
    answers of a question.
    """
