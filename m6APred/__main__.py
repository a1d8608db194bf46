#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
m6APred Main Module

Main entry point for the m6APred package. Provides the following command-line interfaces:
- predict: Predict m6A sites for every row of a feature table (CSV/TSV).
- single: Predict a single m6A site from feature values given on the command line.

The trained classifier is taken from an importable Python object given as
MODULE:ATTR. If ATTR is callable and not itself a classifier it is called
with no arguments to build one.
"""

import os
import sys
import argparse
import importlib
import logging
from datetime import datetime

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)
logger = logging.getLogger('m6APred')

DEFAULT_OUTPUT = os.path.join('m6APred_output', 'm6A_predictions.tsv')


def resolve_model(reference):
    """Import a classifier from a 'module:attribute' reference."""
    module_name, sep, attr = reference.partition(':')
    if not sep or not module_name or not attr:
        raise ValueError(f"Model reference must look like 'module:attribute', got {reference!r}")

    obj = importlib.import_module(module_name)
    for part in attr.split('.'):
        obj = getattr(obj, part)

    from .classifier import Classifier
    if callable(obj) and not isinstance(obj, Classifier) and not hasattr(obj, 'predict_proba'):
        obj = obj()
    return obj


def read_feature_table(path):
    """Read a CSV/TSV feature table into pandas."""
    import datatable as dt

    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file not found: {path}")
    return dt.fread(path).to_pandas()


def build_parser():
    parser = argparse.ArgumentParser(description='m6APred: m6A site prediction from site features and DNA 5-mers')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    default_threshold = 0.5

    # Create the parser for the "predict" command
    predict_parser = subparsers.add_parser('predict', help='Predict m6A sites for every row of a feature table')
    predict_parser.add_argument('--input', type=str, required=True,
                                help='Path to feature table (CSV or TSV) with gc_content, RNA_type, RNA_region, '
                                     'exon_length, distance_to_junction, evolutionary_conservation, DNA_5mer')
    predict_parser.add_argument('--model', type=str, required=True,
                                help='Trained classifier as MODULE:ATTR')
    predict_parser.add_argument('--output', type=str, default=DEFAULT_OUTPUT,
                                help=f'Path to prediction TSV file (default: {DEFAULT_OUTPUT})')
    predict_parser.add_argument('--threshold', type=float, default=default_threshold,
                                help=f'Probability threshold for Positive calls (default: {default_threshold})')
    predict_parser.add_argument('--batch-size', type=int, default=None,
                                help='Score at most this many rows per classifier call (default: all at once)')
    predict_parser.add_argument('--strict-encoding', action='store_true',
                                help='Fail on DNA_5mer symbols outside A/T/C/G instead of encoding them as missing')

    # Create the parser for the "single" command
    single_parser = subparsers.add_parser('single', help='Predict a single m6A site')
    single_parser.add_argument('--model', type=str, required=True,
                               help='Trained classifier as MODULE:ATTR')
    single_parser.add_argument('--gc-content', type=float, required=True, help='GC content')
    single_parser.add_argument('--rna-type', type=str, required=True,
                               help='RNA type (mRNA, lincRNA, lncRNA, pseudogene)')
    single_parser.add_argument('--rna-region', type=str, required=True,
                               help="RNA region (CDS, intron, 3'UTR, 5'UTR)")
    single_parser.add_argument('--exon-length', type=float, required=True, help='Exon length')
    single_parser.add_argument('--distance-to-junction', type=float, required=True,
                               help='Distance to the nearest splice junction')
    single_parser.add_argument('--evolutionary-conservation', type=float, required=True,
                               help='Evolutionary conservation score')
    single_parser.add_argument('--dna-5mer', type=str, required=True, help='DNA 5-mer around the site')
    single_parser.add_argument('--threshold', type=float, default=default_threshold,
                               help=f'Probability threshold for Positive calls (default: {default_threshold})')
    single_parser.add_argument('--strict-encoding', action='store_true',
                               help='Fail on DNA_5mer symbols outside A/T/C/G')
    return parser


def main(argv=None):
    """Main entry point for m6APred"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        start_time = datetime.now()

        if args.command == 'predict':
            from .predict import predict_all

            logger.info(f"Predicting m6A sites with the following parameters:")
            logger.info(f"- Input: {args.input}")
            logger.info(f"- Model: {args.model}")
            logger.info(f"- Output: {args.output}")
            logger.info(f"- Threshold: {args.threshold}")

            model = resolve_model(args.model)
            feature_df = read_feature_table(args.input)
            logger.info(f"Loaded {len(feature_df)} records from {args.input}")

            results = predict_all(model, feature_df, threshold=args.threshold,
                                  batch_size=args.batch_size, strict_encoding=args.strict_encoding)

            output_dir = os.path.dirname(args.output) or '.'
            os.makedirs(output_dir, exist_ok=True)
            results.to_csv(args.output, sep='\t', index=False)
            logger.info(f"Predictions saved to {args.output}")

        elif args.command == 'single':
            from .predict import predict_one

            model = resolve_model(args.model)
            result = predict_one(
                model,
                gc_content=args.gc_content,
                RNA_type=args.rna_type,
                RNA_region=args.rna_region,
                exon_length=args.exon_length,
                distance_to_junction=args.distance_to_junction,
                evolutionary_conservation=args.evolutionary_conservation,
                DNA_5mer=args.dna_5mer,
                threshold=args.threshold,
                strict_encoding=args.strict_encoding,
            )
            print(f"predicted_prob\t{result['predicted_prob']}")
            print(f"predicted_label\t{result['predicted_label']}")

        else:
            parser.print_help()
            return

        # Calculate elapsed time
        elapsed_time = datetime.now() - start_time
        logger.info(f"Total execution time: {elapsed_time}")

    except KeyboardInterrupt:
        logger.error("\nProcess interrupted by user.")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {str(e)}")
        sys.exit(1)


if __name__ == '__main__':
    main()
