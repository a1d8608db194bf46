import numpy as np
import pandas as pd
import pytest

from m6APred.encoding import EncodingError, dna_encoding, position_columns


class TestDNAEncoding:
    """Tests for splitting DNA windows into positional categorical columns."""

    def test_atcga_columns(self):
        seq_df = dna_encoding(['ATCGA'])
        assert list(seq_df.columns) == ['nt_pos1', 'nt_pos2', 'nt_pos3', 'nt_pos4', 'nt_pos5']
        assert list(seq_df.iloc[0]) == ['A', 'T', 'C', 'G', 'A']

    def test_single_string_input(self):
        seq_df = dna_encoding('GGACT')
        assert seq_df.shape == (1, 5)
        assert ''.join(seq_df.iloc[0]) == 'GGACT'

    def test_category_domain_is_fixed(self):
        seq_df = dna_encoding(['AAAAA', 'CCCCC'])
        for col in seq_df.columns:
            assert isinstance(seq_df[col].dtype, pd.CategoricalDtype)
            assert list(seq_df[col].cat.categories) == ['A', 'T', 'C', 'G']

    def test_round_trip_reconstructs_windows(self):
        windows = ['GGACT', 'AGACA', 'TGACC', 'GAACT']
        seq_df = dna_encoding(windows)
        rebuilt = [''.join(row) for row in seq_df.astype(str).itertuples(index=False)]
        assert rebuilt == windows

    def test_length_inferred_from_first_window(self):
        seq_df = dna_encoding(['ACGTACG', 'TTTTTTT'])
        assert list(seq_df.columns) == position_columns(7)

    def test_inconsistent_length_raises(self):
        with pytest.raises(EncodingError, match="Inconsistent window length"):
            dna_encoding(['ATCGA', 'ATCG'])

    def test_longer_later_window_raises(self):
        with pytest.raises(EncodingError, match="Inconsistent window length"):
            dna_encoding(['ATCGA', 'ATCGAA', 'ATCGA'])

    def test_non_string_window_raises(self):
        with pytest.raises(EncodingError, match="not a string"):
            dna_encoding(['ATCGA', None])

    def test_out_of_domain_symbol_is_missing_by_default(self):
        seq_df = dna_encoding(['ATNGA'])
        assert pd.isna(seq_df.loc[0, 'nt_pos3'])
        assert seq_df.loc[0, 'nt_pos4'] == 'G'
        assert 'N' not in seq_df['nt_pos3'].cat.categories

    def test_lowercase_is_out_of_domain(self):
        seq_df = dna_encoding(['atcga'])
        assert seq_df.isna().all(axis=None)

    def test_out_of_domain_symbol_strict_raises(self):
        with pytest.raises(EncodingError, match="out of domain"):
            dna_encoding(['ATNGA'], strict=True)

    def test_series_index_preserved(self):
        windows = pd.Series(['GGACT', 'AGACA'], index=[10, 3])
        seq_df = dna_encoding(windows)
        assert list(seq_df.index) == [10, 3]
        assert seq_df.loc[3, 'nt_pos1'] == 'A'

    def test_empty_input(self):
        seq_df = dna_encoding([])
        assert seq_df.shape == (0, 0)

    def test_numpy_array_input(self):
        seq_df = dna_encoding(np.array(['ATCGA', 'GGGGG']))
        assert seq_df.shape == (2, 5)
        assert seq_df.loc[1, 'nt_pos5'] == 'G'

    def test_input_not_modified(self):
        windows = ['ATCGA', 'GGACT']
        dna_encoding(windows)
        assert windows == ['ATCGA', 'GGACT']
