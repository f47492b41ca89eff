from .candidates import CandidateGeneratorProtocol

__all__ = ["CandidateGeneratorProtocol"]
