import argparse
import os
from typing import List, Optional

from colorama import Fore, Style

from . import __version__, build, console, styles
from .project import Project


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagesmith",
        description=f"{Fore.WHITE}{Style.BRIGHT}Build static html from:{Style.RESET_ALL}\n\n"
                    f"  - Jinja2 views in {Fore.GREEN}src/views/*.j2{Style.RESET_ALL}\n"
                    f"  - markdown with {Fore.GREEN}include{{{{ path }}}}{Style.RESET_ALL} and {Fore.GREEN}{{{{ this.var }}}}{Style.RESET_ALL}\n"
                    f"  - settings in {Fore.GREEN}config/global.yml{Style.RESET_ALL} and {Fore.GREEN}config/templates.yml{Style.RESET_ALL}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-c", "--config", dest="config_dir", default="config", help="configuration directory")
    parser.add_argument("-w", "--watch", action="store_true", help="keep watching the source directory")
    parser.add_argument("-d", "--dev", action="store_true", help="only rebuild views affected by a change")
    parser.add_argument("--nopa11y", action="store_true", help="skip the accessibility audit")
    parser.add_argument("--styles", action="store_true", help="run PostCSS over the style bundles instead")
    parser.add_argument("-v", "--verbose", action="store_true", help="extra console messages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    console.print_banner()
    args = parse_args(argv)
    console.verbose_cli = args.verbose

    project = Project(
        config_dir=args.config_dir,
        development=args.dev or os.environ.get("PAGESMITH_ENV") == "development",
        audit=not args.nopa11y,
    )

    if args.styles:
        styles.run(project)
    else:
        build.run(project, watching=args.watch)
