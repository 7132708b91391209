"""
pstore command line interface

Lists, creates and deletes AWS SSM Parameter Store parameters.

    pstore                              list all parameters as a table
    pstore -csv | -json                 list as CSV or JSON
    pstore -put -name N -value V        create a parameter
    pstore -del -name N                 delete a parameter
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from . import __version__
from .aws_profiles import resolve
from .config import DEFAULT_REGION, CliArgs, ClientConfig
from .errors import PStoreError, ValidationError
from .logging_utils import setup_logging
from .output import render, select_format
from .ssm import SsmClient, list_all, new_client

logger = logging.getLogger(__name__)

STRING = "String"
STRING_LIST = "StringList"
SECURE_STRING = "SecureString"

STRING_FLAGS = ("profile", "role", "region", "endpoint", "name", "value")


def _join_string_values(argv: List[str]) -> List[str]:
    """
    Attach each string flag's value with "=" so it is taken verbatim.

    argparse reads a value starting with "-" as another option, so
    "-value -Xmx512m" becomes "-value=-Xmx512m".
    """
    string_options = {f"{prefix}{flag}" for flag in STRING_FLAGS for prefix in ("-", "--")}
    joined = []
    tokens = iter(argv)
    for token in tokens:
        if token in string_options:
            value = next(tokens, None)
            if value is not None:
                token = f"{token}={value}"
        joined.append(token)
    return joined


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """Parse command line arguments into an immutable CliArgs."""
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="pstore",
        description="List, create and delete AWS SSM Parameter Store parameters",
        allow_abbrev=False,
    )

    parser.add_argument("-profile", "--profile", default="", help="Profile name to use")
    parser.add_argument("-role", "--role", default="", help="Role ARN to assume")
    parser.add_argument("-region", "--region", default=DEFAULT_REGION,
                        help=f"Region name (default: {DEFAULT_REGION})")
    parser.add_argument("-endpoint", "--endpoint", default="", help="AWS API endpoint URL")
    parser.add_argument("-version", "--version", action="store_true", help="Print the version")
    parser.add_argument("-csv", "--csv", action="store_true", help="Output in CSV format")
    parser.add_argument("-json", "--json", action="store_true", help="Output in JSON format")
    parser.add_argument("-put", "--put", action="store_true", help="Create a parameter")
    parser.add_argument("-name", "--name", default="", help="Parameter name")
    parser.add_argument("-value", "--value", default="", help="Parameter value")
    parser.add_argument("-overwrite", "--overwrite", action="store_true",
                        help="Overwrite an existing parameter")
    parser.add_argument("-secure", "--secure", action="store_true",
                        help="Create the parameter as a SecureString")
    parser.add_argument("-list", "--list", action="store_true",
                        help="Create the parameter as a StringList")
    parser.add_argument("-del", "--del", dest="delete", action="store_true",
                        help="Delete a parameter")
    parser.add_argument("-debug", "--debug", action="store_true",
                        help="Log debug output to stderr")

    return CliArgs(**vars(parser.parse_args(_join_string_values(argv))))


def select_parameter_type(name: str, secure: bool = False, as_list: bool = False) -> str:
    """
    Choose the type of a new parameter.

    A name containing "/" selects StringList, like the list flag does.

    Returns:
        str: SecureString, StringList or String
    """
    if secure:
        return SECURE_STRING
    if as_list or "/" in name:
        return STRING_LIST
    return STRING


def build_client(config: ClientConfig) -> SsmClient:
    """Resolve credentials and create the Parameter Store client."""
    return new_client(config.region, config.endpoint, resolve(config))


def _require_name(args: CliArgs) -> str:
    if not args.name:
        raise ValidationError("Please specify a parameter name with -name.")
    return args.name


def run(args: CliArgs, client_factory: Optional[Callable[[ClientConfig], SsmClient]] = None) -> None:
    """
    Run the action selected by the flags: put, then delete, else list.

    Required arguments are checked before any client is created.
    """
    factory = client_factory or build_client

    if args.put:
        name = _require_name(args)
        param_type = select_parameter_type(name, args.secure, args.list)
        logger.debug("Action: put %s as %s", name, param_type)
        factory(args.client_config()).put(name, param_type, args.value, args.overwrite)
    elif args.delete:
        name = _require_name(args)
        logger.debug("Action: delete %s", name)
        factory(args.client_config()).delete(name)
    else:
        logger.debug("Action: list")
        records = list_all(factory(args.client_config()))
        render(records, select_format(args.csv, args.json))


def main(argv: Optional[List[str]] = None,
         client_factory: Optional[Callable[[ClientConfig], SsmClient]] = None) -> int:
    """
    Entry point.

    Returns:
        int: Process exit status
    """
    args = parse_args(argv)
    setup_logging(debug=args.debug)

    if args.version:
        print(__version__)
        return 0

    try:
        run(args, client_factory)
    except PStoreError as e:
        print(e)
        return 1
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
