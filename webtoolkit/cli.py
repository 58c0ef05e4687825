"""
# Web Toolkit: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.

````
webtoolkit post.bbcode [...]    # writes post.html beside each file
webtoolkit -a                   # converts every .bbcode file under the working directory
webtoolkit < post.bbcode        # no files: converts standard input to standard output
````
"""

import argparse
import logging
import os
import sys
from typing import Optional

from webtoolkit._version import __version__
from webtoolkit.constants import BBCODE_FILE_EXTENSION, COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE
from webtoolkit.core import bbcode_to_html

logger = logging.getLogger(__name__)


def build_html_file_name(bbcode_file_name: str) -> str:
    root, extension = os.path.splitext(bbcode_file_name)
    if extension == BBCODE_FILE_EXTENSION:
        return f'{root}.html'

    return f'{bbcode_file_name}.html'


def find_bbcode_files(directory: str) -> list[str]:
    return sorted(
        os.path.join(path, file_name)
        for path, _, file_names in os.walk(directory)
        for file_name in file_names
        if file_name.endswith(BBCODE_FILE_EXTENSION)
    )


def convert_file(bbcode_file_name: str, verbose_mode_enabled: bool = False) -> str:
    """
    Convert a BBCode file, writing the HTML beside it.

    Returns the name of the HTML file written.
    """
    with open(bbcode_file_name, 'r', encoding='utf-8') as bbcode_file:
        bbcode = bbcode_file.read()

    html_file_name = build_html_file_name(bbcode_file_name)
    with open(html_file_name, 'w', encoding='utf-8') as html_file:
        html_file.write(bbcode_to_html(bbcode, verbose_mode_enabled))

    return html_file_name


def build_argument_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(description='Convert BBCode to HTML.')
    argument_parser.add_argument('-v', '--version', action='version', version=f'%(prog)s version {__version__}')
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help='convert all BBCode files under the working directory',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help='run in verbose mode (prints every rule applied)',
    )
    argument_parser.add_argument(
        'bbcode_file_names',
        nargs='*',
        metavar='file.bbcode',
        help='BBCode file to be converted (standard input if none given)',
    )

    return argument_parser


def main(arguments: Optional[list[str]] = None):
    argument_parser = build_argument_parser()
    parsed_arguments = argument_parser.parse_args(arguments)
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    logging.basicConfig(
        format='%(levelname)s: %(message)s',
        level=logging.INFO if verbose_mode_enabled else logging.WARNING,
    )

    if parsed_arguments.all_mode_enabled:
        if parsed_arguments.bbcode_file_names:
            argument_parser.error('option -a (or --all) cannot be used with positional argument')
        bbcode_file_names = find_bbcode_files(os.curdir)
    elif parsed_arguments.bbcode_file_names:
        bbcode_file_names = parsed_arguments.bbcode_file_names
    else:
        sys.stdout.write(bbcode_to_html(sys.stdin.read(), verbose_mode_enabled))
        return

    for bbcode_file_name in bbcode_file_names:
        try:
            html_file_name = convert_file(bbcode_file_name, verbose_mode_enabled)
        except FileNotFoundError:
            logger.error('file `%s` not found', bbcode_file_name)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        except OSError as os_error:
            logger.error('cannot convert `%s`: %s', bbcode_file_name, os_error)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        logger.info('converted `%s` to `%s`', bbcode_file_name, html_file_name)


if __name__ == '__main__':
    main()
