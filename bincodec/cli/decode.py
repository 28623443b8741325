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

import argparse
import sys
from argparse import ArgumentParser, Namespace
from typing import Optional

from structlog import get_logger

logger = get_logger()


def parse_hex(text: str) -> bytes:
    """Parse a hex string, whitespace and an optional 0x prefix are ignored."""
    try:
        return bytes.fromhex(text.strip().removeprefix('0x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid hex string: {text!r}') from None


def create_parser() -> ArgumentParser:
    from bincodec.cli.util import add_codec_arguments, create_parser
    parser = create_parser()
    add_codec_arguments(parser)
    parser.add_argument('data', type=parse_hex, help='Bytes to decode in hex, for example ffff')
    return parser


def execute(args: Namespace) -> int:
    from bincodec.binary import get_builtin
    from bincodec.cli.util import print_error

    function = get_builtin(f'decode_{args.type}_from_{args.byte_order}_endian')
    logger.debug('decoding', function=function.name, data=args.data.hex())

    result = function(args.data)
    if result.is_err():
        return print_error(result.unwrap_err())

    print(result.unwrap())
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])
    return execute(args)
