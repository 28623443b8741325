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


def create_parser() -> ArgumentParser:
    from bincodec.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('--qualified', action='store_true',
                        help='Print names with the module prefix, for example binary.encode_i8()')
    return parser


def execute(args: Namespace) -> int:
    from bincodec.binary import BINARY_BUILTINS
    from bincodec.conf.get_settings import get_global_settings

    settings = get_global_settings()
    for name in sorted(BINARY_BUILTINS):
        function = BINARY_BUILTINS[name]
        print(function.qualified_name(settings) if args.qualified else name)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])
    return execute(args)
