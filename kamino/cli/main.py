"""Command-line entry point for kamino"""

import sys
from rich.console import Console
from rich.markup import escape
from kamino.cli.args import parse_args
from kamino.config import Config
from kamino.core import Kamino
from kamino.formatters import display_text
from kamino.logging_config import setup_logging

console = Console(stderr=True, highlight=False)


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            root=parsed_args.dir,
            remote_name=parsed_args.remote,
            keep_going=parsed_args.keep_going,
            skip_branch_errors=parsed_args.skip_branch_errors,
            parallel=parsed_args.parallel or parsed_args.workers is not None,
            workers=parsed_args.workers,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            from kamino.utils.threading import get_threading_info
            threading_info = get_threading_info()
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print(f"  Python version: {threading_info['python_version']}")
            console.print(f"  Threading mode: {threading_info['mode']}")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {escape(display_text(value))}")

        ok = Kamino(config).run()
        return 0 if ok else 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(display_text(e))}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
