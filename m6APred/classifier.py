#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""m6APred Classifier Interface

The trained model is consumed as a capability: given a feature table, return
the probability of the positive class for each row. Fitted scikit-learn
estimators (for example a Pipeline ending in a RandomForestClassifier) are
adapted through SklearnClassifier.
"""

import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

POSITIVE_LABEL = 'Positive'
NEGATIVE_LABEL = 'Negative'


class Classifier:
    """Minimal scoring interface used by the predictors."""

    def score(self, table: pd.DataFrame) -> np.ndarray:
        """Return positive-class probabilities, one per row of table."""
        raise NotImplementedError


class SklearnClassifier(Classifier):
    def __init__(self, estimator, positive_label=POSITIVE_LABEL):
        """Wrap a fitted estimator exposing predict_proba and classes_.

        Args:
            estimator: Fitted classifier or pipeline.
            positive_label: Class label whose probability column is returned.
        """
        self.estimator = estimator
        self.positive_label = positive_label

    def _positive_index(self):
        classes = list(getattr(self.estimator, 'classes_', []))
        if self.positive_label not in classes:
            raise ValueError(
                f"Positive label {self.positive_label!r} not among classifier classes {classes}"
            )
        return classes.index(self.positive_label)

    def score(self, table):
        idx = self._positive_index()
        probs = np.asarray(self.estimator.predict_proba(table))
        return probs[:, idx].astype(float)

    def __repr__(self):
        return f"SklearnClassifier({self.estimator!r}, positive_label={self.positive_label!r})"


def as_classifier(model, positive_label=POSITIVE_LABEL) -> Classifier:
    """Return model as a Classifier, adapting predict_proba estimators.

    predict_proba is checked before score because scikit-learn estimators
    also define score(X, y) with a different meaning.
    """
    if isinstance(model, Classifier):
        return model
    if hasattr(model, 'predict_proba'):
        return SklearnClassifier(model, positive_label=positive_label)
    if callable(getattr(model, 'score', None)):
        return model
    raise TypeError(
        f"{type(model).__name__} provides neither predict_proba nor score; cannot be used as a classifier"
    )
