"""CLI entry point into one contingency table analysis of an ion table file."""
import argparse
import sys

from contingencytable3d.ion_data.tabular import read_ion_table
from contingencytable3d.ion_data.in_memory import DEFAULT_CHUNK_SIZE
from contingencytable3d.analysis.options import AnalysisOptions
from contingencytable3d.analysis.config_reader import read_analysis_config
from contingencytable3d.analysis.core import ContingencyTable3DAnalysis
from contingencytable3d.analysis.errors import InvalidConfigurationError
from contingencytable3d.reporting.text_report import render_text_report
from contingencytable3d.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        prog='ct3d analysis run',
        description='Contingency tables of binned per-block ion counts, for every pair of '
                    'ion types or elements.',
    )
    parser.add_argument('--input-file', dest='input_file', type=str, required=True,
                        help='Table of ions with columns x, y, z and ion (empty for unranged).')
    parser.add_argument('--config-file', dest='config_file', type=str, required=False,
                        help='INI file with a [contingency-table] section.')
    parser.add_argument('--block-size', dest='block_size', type=int, required=False,
                        help='Atoms per spatial block, 0-1000.')
    parser.add_argument('--bin-size', dest='bin_size', type=int, required=False,
                        help='Atoms per bin. Must be no greater than block size.')
    decompose = parser.add_mutually_exclusive_group()
    decompose.add_argument('--decompose', dest='decomposing', action='store_true', default=None,
                           help='Count compound ions as their elemental constituents (default).')
    decompose.add_argument('--no-decompose', dest='decomposing', action='store_false',
                           help='Treat each ion type as a unit.')
    parser.set_defaults(decomposing=None)
    parser.add_argument('--chunk-size', dest='chunk_size', type=int, default=DEFAULT_CHUNK_SIZE)
    parser.add_argument('--output-file', dest='output_file', type=str, required=False,
                        help='Where to write the text report. Printed if omitted.')
    return parser.parse_args(argv)


def get_options(args) -> AnalysisOptions:
    if args.config_file is not None:
        return read_analysis_config(
            args.config_file,
            block_size=args.block_size,
            bin_size=args.bin_size,
            decomposing=args.decomposing,
        )
    if args.block_size is None or args.bin_size is None:
        raise InvalidConfigurationError('Supply --block-size and --bin-size, or a --config-file.')
    return AnalysisOptions(
        block_size=args.block_size,
        bin_size=args.bin_size,
        decomposing=True if args.decomposing is None else args.decomposing,
    )


def main(argv=None) -> int:
    args = parse_arguments(argv)
    try:
        options = get_options(args)
        options.validate()
    except InvalidConfigurationError as error:
        print(str(error), file=sys.stderr)
        return 1
    ion_data = read_ion_table(args.input_file, chunk_size=args.chunk_size)
    result = ContingencyTable3DAnalysis(options).run(ion_data)
    report = render_text_report(result)
    if args.output_file is None:
        print(report)
    else:
        with open(args.output_file, 'wt', encoding='utf-8') as file:
            file.write(report)
        logger.info('Wrote report to %s.', args.output_file)
    return 0


if __name__ == '__main__':
    sys.exit(main())
