#!/usr/bin/env python3
#
# Copyright (C) 2016 The University of Sheffield, UK
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#

import argparse
import sys

from CrxTool.config import const_private_key_file, const_verbose
from CrxTool.crx import (verify_crxfile, extract_crxfile, pack_crxfile,
                         read_crx)
from CrxTool.errors import Error
from CrxTool.util import setup_logger, log_error, log_exception


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("file", help="chrome extension archive (*.crx)")
    parser.add_argument("-c", "--check", help="verify format and show metadata of <file>",
                        action="store_true")
    parser.add_argument("-e", "--extract", help="extract <file>",
                        action="store_true")
    parser.add_argument("-d", "--dest", help="directory to extract into",
                        default=".")
    parser.add_argument("-f", "--force", help="apply action also to (potential) invalid files",
                        action="store_true")
    parser.add_argument("-i", "--id", help="print the extension id of <file>",
                        action="store_true")
    parser.add_argument("-p", "--pack", metavar="DIR",
                        help="pack the extension in <DIR> into <file>")
    parser.add_argument("-k", "--key", help="private key (PEM or DER) used for packing",
                        default=const_private_key_file())
    parser.add_argument("-g", "--generate-key", help="generate a key if none is available",
                        action="store_true")
    parser.add_argument("-v", "--verbose", help="increase verbosity",
                        action="store_true", default=const_verbose())
    args = parser.parse_args()

    setup_logger(args.verbose)

    try:
        if args.pack:
            retval = pack_crxfile(args.verbose, args.pack, args.key, args.file,
                                  args.generate_key)
        elif args.extract:
            retval = extract_crxfile(args.verbose, args.force, args.file,
                                     args.dest)
        elif args.id:
            print(read_crx(args.file).metadata.id)
            retval = 0
        else:
            retval = verify_crxfile(args.verbose, args.file)
    except Error as e:
        log_error("{}: {}".format(args.file, e))
        retval = 1
    except OSError as e:
        log_exception("{}: {}".format(args.file, e))
        retval = 1

    sys.exit(retval)


if __name__ == "__main__":
    main()
