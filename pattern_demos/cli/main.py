"""
Main CLI module with argument parsing and command execution.

This module provides the command line interface including:
- Command line argument parsing
- Listing and running registered demos
- Optional metrics output after a run
"""
import os
import sys
import argparse
import logging
from typing import List, Optional

from pattern_demos import create_app
from pattern_demos.config.settings import get_config
from pattern_demos.domain.interfaces.demo_manager import IDemoManager
from pattern_demos.infrastructure.monitoring import render_metrics


logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "pattern-demos",
        description="Runnable demonstrations of classic object-oriented design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                      # List available demos
  %(prog)s run                       # Run every demo
  %(prog)s run adapter decorator     # Run selected demos in order
  %(prog)s --metrics run adapter     # Print counters after the run
        """
    )
    
    # Global options
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Set logging level')
    parser.add_argument('--metrics', action='store_true', help='Print Prometheus metrics after running')
    
    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    
    subparsers.add_parser('list', help='List available demos')
    
    run_parser = subparsers.add_parser('run', help='Run demos')
    run_parser.add_argument('names', nargs='*', metavar='NAME', help='Demo names (default: all)')
    
    args = parser.parse_args(argv)
    if args.command is None:
        args.command = 'run'
        args.names = []
    return args


def list_demos(demo_manager: IDemoManager) -> None:
    """Print every registered demo with its description."""
    demos = demo_manager.get_all_demos()
    width = max((len(name) for name in demos), default=0)
    for name, demo in demos.items():
        print(f"{name.ljust(width)}  {demo.get_description()}")


def run_demos(demo_manager: IDemoManager, names: List[str]) -> None:
    """Run the selected demos, separated by a blank line and a header."""
    demos = demo_manager.get_all_demos()
    selected = names or get_config().get_default_demo_names() or list(demos)

    unknown = [name for name in selected if name not in demos]
    if unknown:
        raise ValueError(f"Unknown demo(s): {', '.join(unknown)} (available: {', '.join(demos)})")

    for index, name in enumerate(selected):
        if index:
            print()
        print(f"##### {name} #####")
        demo_manager.run_demo(name)


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.
    
    Args:
        argv: Arguments to parse, defaults to sys.argv[1:]
        
    Returns:
        Process exit code
    """
    args = parse_args(argv)
    
    log_level = logging.getLevelName(args.log_level) if args.log_level else None
    demo_manager = create_app(log_level=log_level)
    
    try:
        if args.command == 'list':
            list_demos(demo_manager)
        else:
            run_demos(demo_manager, args.names)
    except ValueError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    if args.metrics:
        print()
        print(render_metrics(), end="")
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
