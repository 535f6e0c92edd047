import os
import pathlib
from argparse import ArgumentParser


def get_parser():
    parser = ArgumentParser(prog="gitobj")
    parser.add_argument(
        "--git-dir",
        type=pathlib.Path,
        default=pathlib.Path(os.environ.get("GIT_DIR", ".git")),
    )
    parser.add_argument("--remote", help="base URL of a repository served over HTTP")
    parser.add_argument("-v", "--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # cat-file
    cat_file_parser = subparsers.add_parser("cat-file")
    cat_file_parser.add_argument(
        "-p", "--pretty-print", action="store_true", help="pretty print"
    )
    cat_file_parser.add_argument(
        "hash",
    )

    # hash-object
    hash_object_parser = subparsers.add_parser("hash-object")
    hash_object_parser.add_argument("path", type=pathlib.Path)

    # ls-tree
    ls_tree_parser = subparsers.add_parser("ls-tree")
    ls_tree_parser.add_argument("--name-only", action="store_true")
    ls_tree_parser.add_argument("hash_value")

    return parser
