#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""m6APred Schema Module

Category domains and feature columns shared by the sequence encoder and the
predictors. The classifier was fit against exactly these domains, so values
outside them are mapped to a missing category and never added as new levels.

Feature record:
- gc_content: GC content of the region (numeric)
- RNA_type: mRNA, lincRNA, lncRNA, pseudogene
- RNA_region: CDS, intron, 3'UTR, 5'UTR
- exon_length: Exon length (numeric)
- distance_to_junction: Distance to the nearest splice junction (numeric)
- evolutionary_conservation: Conservation score (numeric)
- DNA_5mer: Nucleotide window around the candidate site
"""

import logging
from enum import Enum
from typing import List, Type

import pandas as pd

logger = logging.getLogger(__name__)


class SchemaError(ValueError):
    """Raised when a feature table does not match the expected schema."""


class RNAType(str, Enum):
    MRNA = "mRNA"
    LINCRNA = "lincRNA"
    LNCRNA = "lncRNA"
    PSEUDOGENE = "pseudogene"


class RNARegion(str, Enum):
    CDS = "CDS"
    INTRON = "intron"
    UTR3 = "3'UTR"
    UTR5 = "5'UTR"


class Nucleotide(str, Enum):
    A = "A"
    T = "T"
    C = "C"
    G = "G"


NUMERIC_FEATURES = [
    'gc_content', 'exon_length', 'distance_to_junction', 'evolutionary_conservation'
]

# Column name -> closed category domain
CATEGORICAL_FEATURES = {
    'RNA_type': RNAType,
    'RNA_region': RNARegion,
}

SEQUENCE_FEATURE = 'DNA_5mer'

REQUIRED_FEATURES = [
    'gc_content', 'RNA_type', 'RNA_region', 'exon_length',
    'distance_to_junction', 'evolutionary_conservation', 'DNA_5mer'
]


def levels(domain: Type[Enum]) -> List[str]:
    """Return the category levels of an enumerated domain in declaration order."""
    return [member.value for member in domain]


def coerce_categorical(values, domain: Type[Enum], name: str = None) -> pd.Categorical:
    """Restrict values to a closed category domain.

    Args:
        values: Scalar or array-like of raw values.
        domain: Enum class listing the allowed levels.
        name: Column name used in log messages.

    Returns:
        pd.Categorical whose categories are exactly the domain levels.
        Values outside the domain become missing (NaN).
    """
    if isinstance(values, (str, Enum)) or not hasattr(values, '__len__'):
        values = [values]
    raw = [v.value if isinstance(v, Enum) else v for v in values]
    categorical = pd.Categorical(raw, categories=levels(domain))

    unmapped = int(pd.isna(categorical).sum() - pd.isna(pd.Series(raw, dtype=object)).sum())
    if unmapped > 0:
        logger.warning(f"{unmapped} value(s) of {name or domain.__name__} outside "
                       f"{levels(domain)} set to missing")
    return categorical


def check_required_columns(df: pd.DataFrame, required: List[str] = None) -> None:
    """Raise SchemaError if any required feature column is absent."""
    required = REQUIRED_FEATURES if required is None else required
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise SchemaError(f"Missing required feature column(s): {', '.join(missing)}")


def coerce_numeric(series: pd.Series, name: str) -> pd.Series:
    """Convert a numeric feature column, raising SchemaError on non-numeric values."""
    try:
        return pd.to_numeric(series, errors='raise')
    except (ValueError, TypeError) as e:
        raise SchemaError(f"Feature column {name} must be numeric: {e}") from e
