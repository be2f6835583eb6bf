from typing import Protocol


class CommonPasswordLookup(Protocol):
    """
    Contract for the common-password source consulted by the evaluator.

    Any callable taking the candidate and returning a bool satisfies it, so a
    plain function, a lambda or a CommonPasswordCatalogue can be injected.
    """

    def __call__(self, candidate: str) -> bool:
        """
        Return True if the candidate matches a catalogued password.

        Args:
            candidate: The password being evaluated

        Returns:
            bool: True if some catalogued entry is a case-insensitive prefix
            of the candidate
        """
        ...


def never_common(candidate: str) -> bool:
    """Null lookup used when no catalogue is configured."""
    return False
