#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

import sys
from argparse import ArgumentParser, Namespace
from typing import Optional

from structlog import get_logger

logger = get_logger()


def parse_number(text: str) -> int | float | str:
    """ Parse an integer (with an optional 0x, 0o or 0b prefix) or a float.

    Anything else is returned unchanged so the codec reports it as a type error.
    """
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def create_parser() -> ArgumentParser:
    from bincodec.cli.util import add_codec_arguments, create_parser
    parser = create_parser()
    add_codec_arguments(parser)
    parser.add_argument('value', help='Number to encode, for example -1, 0xff or 42.5')
    return parser


def execute(args: Namespace) -> int:
    from bincodec.binary import get_builtin
    from bincodec.cli.util import print_error

    function = get_builtin(f'encode_{args.type}_to_{args.byte_order}_endian')
    number = parse_number(args.value)
    logger.debug('encoding', function=function.name, value=number)

    result = function(number)
    if result.is_err():
        return print_error(result.unwrap_err())

    print(result.unwrap().hex())
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])
    return execute(args)
