"""Shared pytest fixtures for m6APred tests."""

import numpy as np
import pandas as pd
import pytest

from m6APred.classifier import Classifier


class ConstantClassifier(Classifier):
    """Returns the same probability for every row and records what it saw."""

    def __init__(self, prob):
        self.prob = prob
        self.calls = []

    def score(self, table):
        self.calls.append(table.copy())
        return np.full(len(table), self.prob, dtype=float)


class GCClassifier(Classifier):
    """Uses gc_content as the probability, so each row scores differently."""

    def __init__(self):
        self.calls = []

    def score(self, table):
        self.calls.append(table.copy())
        return table['gc_content'].to_numpy(dtype=float)


@pytest.fixture
def constant_classifier():
    return ConstantClassifier


@pytest.fixture
def gc_classifier():
    return GCClassifier()


@pytest.fixture
def single_record():
    return {
        'gc_content': 0.5,
        'RNA_type': 'mRNA',
        'RNA_region': 'CDS',
        'exon_length': 120,
        'distance_to_junction': 30,
        'evolutionary_conservation': 0.8,
        'DNA_5mer': 'ATCGA',
    }


@pytest.fixture
def feature_df():
    """Small feature table covering every category level."""
    return pd.DataFrame({
        'gc_content': [0.61, 0.42, 0.55, 0.30, 0.75],
        'RNA_type': ['mRNA', 'lincRNA', 'lncRNA', 'pseudogene', 'mRNA'],
        'RNA_region': ['CDS', 'intron', "3'UTR", "5'UTR", 'CDS'],
        'exon_length': [120, 1500, 432, 87, 960],
        'distance_to_junction': [30, 210, 5, 77, 1200],
        'evolutionary_conservation': [0.8, 0.1, 0.55, 0.23, 0.97],
        'DNA_5mer': ['GGACT', 'AGACA', 'TGACC', 'GAACT', 'ATCGA'],
    })
