"""Naive Bayes classifiers that predict a robot's faction from categorical features."""

__version__ = "0.1.0"
__all__ = ["combined", "fixed_vocab", "smoothed_prior", "subsets"]