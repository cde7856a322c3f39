#!/usr/bin/env python

import argparse
import sys
import mapanalyzer
import logging
from mapanalyzer import analyzer_runner

# setup log
logger = logging.getLogger('mapanalyzer')

logger.info("mapanalyzer %s (Python %s)" % (
                mapanalyzer.__version__,
                '.'.join(map(str, sys.version_info[:3]))))

parser = argparse.ArgumentParser(description="Run mapanalyzer")
parser.add_argument("input_filename",
                    help="tab separated road map input file")
parser.add_argument("output_filename",
                    help="file the analysis report is written to")
parser.add_argument("--json_filename", "-j",
        help="also write the barely connected map as node-link json")
parser.add_argument("--output_directory", "-o",
        default=".",
        help="directory where all output files will be written")

args = parser.parse_args()

cfg = {'input_filename': args.input_filename,
       'output_filename': args.output_filename}
if args.json_filename:
    cfg['json_filename'] = args.json_filename

runner = analyzer_runner.MapAnalyzerRunner(cfg, args.output_directory)

try:
    runner.validate()
except Exception as e:
    sys.exit("validation failed: {}".format(str(e)))

try:
    runner.run()
except Exception as e:
    sys.exit("run failed: {}".format(str(e)))
