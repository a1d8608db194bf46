#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
m6APred: m6A RNA methylation site prediction

This package encodes site features and DNA 5-mers into the feature table a
trained classifier expects, and turns the classifier's positive-class
probability into Positive/Negative calls.
"""

__version__ = "0.1.0"

# Core modules
from .schema import RNAType, RNARegion, Nucleotide, SchemaError, REQUIRED_FEATURES
from .encoding import dna_encoding, EncodingError
from .classifier import Classifier, SklearnClassifier, as_classifier
from .predict import predict_all, predict_one, label_predictions

__all__ = [
    "dna_encoding", "predict_all", "predict_one", "label_predictions",
    "Classifier", "SklearnClassifier", "as_classifier",
    "RNAType", "RNARegion", "Nucleotide", "REQUIRED_FEATURES",
    "SchemaError", "EncodingError",
]
