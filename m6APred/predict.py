#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""m6APred Prediction Module

Batch and single-record m6A site prediction with a trained classifier.

Model Input:
- 4 numeric features: gc_content, exon_length, distance_to_junction,
  evolutionary_conservation
- 2 categorical features: RNA_type, RNA_region (closed domains)
- DNA_5mer plus its per-position encoding nt_pos1..nt_posN

Output:
- predicted_prob: Positive-class probability
- predicted_label: "Positive" if predicted_prob > threshold, else "Negative"
"""

import logging

import numpy as np
import pandas as pd

from .classifier import NEGATIVE_LABEL, POSITIVE_LABEL, as_classifier
from .encoding import dna_encoding
from .schema import (
    CATEGORICAL_FEATURES,
    NUMERIC_FEATURES,
    REQUIRED_FEATURES,
    SEQUENCE_FEATURE,
    check_required_columns,
    coerce_categorical,
    coerce_numeric,
)

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.5
PROB_COLUMN = 'predicted_prob'
LABEL_COLUMN = 'predicted_label'


def label_predictions(probs, threshold=DEFAULT_THRESHOLD):
    """Map probabilities to Positive/Negative (strictly greater than threshold is Positive)."""
    probs = np.asarray(probs, dtype=float)
    return np.where(probs > threshold, POSITIVE_LABEL, NEGATIVE_LABEL)


def build_feature_table(feature_df, strict_encoding=False):
    """Assemble the classifier input from a raw feature table.

    Categorical features are restricted to their domains, numeric features
    are converted and the DNA_5mer windows are expanded into nt_pos columns.
    The input frame is not modified.
    """
    check_required_columns(feature_df)

    features = feature_df.loc[:, REQUIRED_FEATURES].copy()
    for col in NUMERIC_FEATURES:
        features[col] = coerce_numeric(features[col], col)
    for col, domain in CATEGORICAL_FEATURES.items():
        features[col] = pd.Series(
            coerce_categorical(features[col], domain, name=col), index=features.index
        )

    seq_df = dna_encoding(features[SEQUENCE_FEATURE], strict=strict_encoding)
    return pd.concat([features, seq_df], axis=1)


def _score(classifier, features, batch_size=None):
    """Score the feature table, optionally in consecutive row chunks."""
    n_rows = len(features)
    if batch_size is None or batch_size >= n_rows:
        probs = np.asarray(classifier.score(features), dtype=float).reshape(-1)
    else:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        chunks = []
        for start in range(0, n_rows, batch_size):
            end = min(start + batch_size, n_rows)
            chunks.append(np.asarray(classifier.score(features.iloc[start:end]), dtype=float).reshape(-1))
        probs = np.concatenate(chunks)

    if len(probs) != n_rows:
        raise ValueError(f"Classifier returned {len(probs)} probabilities for {n_rows} rows")
    return probs


def predict_all(ml_fit, feature_df, threshold=DEFAULT_THRESHOLD, batch_size=None,
                strict_encoding=False):
    """Predict m6A status for every row of a feature table.

    Args:
        ml_fit: Classifier, or a fitted estimator with predict_proba.
        feature_df: pd.DataFrame containing all required feature columns.
        threshold: Probability cutoff; rows above it are labeled Positive.
        batch_size: Score at most this many rows per classifier call.
        strict_encoding: Raise on DNA_5mer symbols outside A/T/C/G.

    Returns:
        Copy of feature_df (same index and row order) with predicted_prob
        and predicted_label columns appended.
    """
    classifier = as_classifier(ml_fit)
    check_required_columns(feature_df)

    result = feature_df.copy()
    if len(feature_df) == 0:
        logger.warning("No records to predict!")
        result[PROB_COLUMN] = pd.Series(dtype=float)
        result[LABEL_COLUMN] = pd.Series(dtype=object)
        return result

    features = build_feature_table(feature_df, strict_encoding=strict_encoding)
    logger.info(f"Scoring {len(features)} records with {features.shape[1]} feature columns")

    probs = _score(classifier, features, batch_size=batch_size)
    result[PROB_COLUMN] = probs
    result[LABEL_COLUMN] = label_predictions(probs, threshold)

    n_positive = int((result[LABEL_COLUMN] == POSITIVE_LABEL).sum())
    logger.info(f"Predicted {n_positive}/{len(result)} positive m6A sites (threshold={threshold})")
    return result


def predict_one(ml_fit, gc_content, RNA_type, RNA_region, exon_length,
                distance_to_junction, evolutionary_conservation, DNA_5mer,
                threshold=DEFAULT_THRESHOLD, strict_encoding=False):
    """Predict m6A status for a single site.

    Returns:
        dict: {'predicted_prob': float, 'predicted_label': 'Positive' | 'Negative'}
    """
    classifier = as_classifier(ml_fit)
    single_df = pd.DataFrame({
        'gc_content': [gc_content],
        'RNA_type': [RNA_type],
        'RNA_region': [RNA_region],
        'exon_length': [exon_length],
        'distance_to_junction': [distance_to_junction],
        'evolutionary_conservation': [evolutionary_conservation],
        'DNA_5mer': [DNA_5mer],
    })

    features = build_feature_table(single_df, strict_encoding=strict_encoding)
    prob = float(_score(classifier, features)[0])
    return {
        PROB_COLUMN: prob,
        LABEL_COLUMN: str(label_predictions([prob], threshold)[0]),
    }
