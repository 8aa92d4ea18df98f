import argparse
import logging
import os
import sys

from .commands import (
    hide_message,
    extract_message,
    remove_chunk,
    list_chunks,
)
from .exceptions import PngmeException


logger = logging.getLogger(__name__)


def get_parser():
    parser = argparse.ArgumentParser(prog='pngme', description='A PNG message encoder/decoder')
    subparsers = parser.add_subparsers(dest='command', required=True)

    encode = subparsers.add_parser('encode', help='hide a message in a new chunk')
    encode.add_argument('file_path')
    encode.add_argument('chunk_type')
    encode.add_argument('message')
    encode.add_argument('output_file', nargs='?')

    decode = subparsers.add_parser('decode', help='print the message in the first chunk of the given type')
    decode.add_argument('file_path')
    decode.add_argument('chunk_type')

    remove = subparsers.add_parser('remove', help='remove the first chunk of the given type')
    remove.add_argument('file_path')
    remove.add_argument('chunk_type')

    print_ = subparsers.add_parser('print', help='list the chunks of the file')
    print_.add_argument('file_path')

    return parser


def main(argv=None):
    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    args = get_parser().parse_args(argv)

    try:
        if args.command == 'encode':
            hide_message(args.chunk_type, args.message, args.file_path, args.output_file)
            print('Encoding')
        elif args.command == 'decode':
            message = extract_message(args.file_path, args.chunk_type)
            print(f'Found chunk data : {message}')
            print('Decoding')
        elif args.command == 'remove':
            remove_chunk(args.file_path, args.chunk_type)
            print('Removing')
        elif args.command == 'print':
            for chunk_type, length in list_chunks(args.file_path):
                print(f'Chunk Type: {chunk_type}, Length: {length}')
    except (PngmeException, OSError) as e:
        logger.debug('operation failed', exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return 1

    return 0
