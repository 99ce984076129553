# main.py
"""Main entry point for the token report application.

Usage: python main.py [companies_file] [users_file]
"""
import sys
import traceback

# Application modules
import config
from logger import setup_logging
from handlers.data_processor import DataProcessor
from handlers.txt_renderer import TxtRenderer


def run_report(companies_file_name, users_file_name, out=None):
    """Process both inputs and write the report, or the error report, to ``out``.

    Returns:
        int: 0 when the report was written, 1 when errors were written instead
    """
    if out is None:
        out = sys.stdout
    processor = DataProcessor()
    renderer = TxtRenderer()

    outcome = processor.process(companies_file_name, users_file_name)
    if outcome.has_errors:
        out.write(renderer.render_errors(outcome.errors))
        return 1

    out.write(renderer.render(outcome.results))
    return 0


def main(argv=None):
    """Set up logging, run the report and map failures to an exit code."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) > 2:
        sys.stderr.write(__doc__.strip().splitlines()[-1] + "\n")
        return 2

    companies_file_name = argv[0] if len(argv) > 0 else config.COMPANIES_FILE
    users_file_name = argv[1] if len(argv) > 1 else config.USERS_FILE

    loggers = setup_logging()
    app_logger = loggers['app']
    error_logger = loggers['error']
    debug_logger = loggers['debug']

    app_logger.info("Starting token report")
    debug_logger.debug(f"Inputs: {companies_file_name}, {users_file_name} (data folder: {config.DATA_FOLDER})")

    try:
        exit_code = run_report(companies_file_name, users_file_name)
    except Exception as e:
        stack_trace = traceback.format_exc()
        error_logger.critical(f"Unhandled exception: {str(e)}\n{stack_trace}")
        return 1

    app_logger.info(f"Token report finished with exit code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
