import logging
import sys

from gitobj.errors import GitObjectError
from gitobj.models import Git, HttpStorage
from gitobj.utils import get_parser


def run(args):
    storage = HttpStorage(args.remote) if args.remote else None
    with Git(args.git_dir, storage=storage) as git:
        match args.command:
            case "cat-file":
                return git.cat_file(args.hash, pretty_print=args.pretty_print)
            case "hash-object":
                return git.hash_object(args.path)
            case "ls-tree":
                return git.ls_tree(args.hash_value, name_only=args.name_only)
            case _:
                raise RuntimeError(f"Unknown command #{args.command}")


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        run(args)
    except GitObjectError as exc:
        sys.stderr.write(f"fatal: {exc}\n")
        return 128
    return 0


if __name__ == "__main__":
    sys.exit(main())
