#!/usr/bin/env python3
"""
Revelio CLI - uncover secrets in minified JavaScript files
Two modes: dict (known variable names) and enum (every string assignment)
"""

import sys

from colorama import init, Fore, Style

from revelio import __version__
from revelio.core.config import get_default_config
from revelio.core.exceptions import InputError, ListFileError
from revelio.core.logger import logger, set_silent, set_verbose
from revelio.models import ExtractionRequest
from revelio.output.json_exporter import JSONExporter
from revelio.output.text_report import format_results, write_report
from revelio.pipelines.extraction import ExtractionRunner
from revelio.services.lists import resolve_filters, resolve_urls, resolve_variables


def print_banner():
    banner = (
        Fore.CYAN + "\n  revelio-js " + Fore.WHITE + f"v{__version__}\n"
        + Fore.YELLOW + "  Uncover secrets in minified JavaScript files\n"
        + Fore.WHITE + "  For authorized security testing only\n"
        + Style.RESET_ALL
    )
    print(banner, file=sys.stderr, flush=True)


def show_help():
    print(f"""
{Fore.CYAN}Usage:{Style.RESET_ALL}
    revelio-js <command> [options]

{Fore.CYAN}Commands:{Style.RESET_ALL}
    {Fore.GREEN}dict{Style.RESET_ALL}    Dictionary mode: search for specific variable names
    {Fore.GREEN}enum{Style.RESET_ALL}    Enumeration mode: search for all variables

{Fore.CYAN}Common options:{Style.RESET_ALL}
    -u, --url <url>            URL of the JavaScript file to analyze
    -U, --url-list <file>      File containing a list of URLs to analyze
    -o, --output <file>        File to save the output
    -j, --json <file>          Also export results as JSON
    -c, --concurrency <n>      Number of files fetched in parallel
    -t, --timeout <seconds>    Per-request timeout
    -v, --verbose              Verbose output
    -s, --silent               Silent mode (errors only)
    --version                  Print the version

{Fore.CYAN}dict options:{Style.RESET_ALL}
    -w, --word <variable>      Variable to search for (repeatable)
    -W, --wordlist <file>      Wordlist file of variables to search for

{Fore.CYAN}enum options:{Style.RESET_ALL}
    -f, --filter <word>        Keep names containing word (repeatable)
    -F, --filter-list <file>   File containing filter words
    -m, --min-length <n>       Minimum length of variable names to include

{Fore.CYAN}Examples:{Style.RESET_ALL}
    revelio-js dict -u https://example.com/app.js -w apiKey -w token
    revelio-js enum -U urls.txt -f key -m 5 -o results.txt
""")


VALUE_OPTIONS = {
    '-u': 'url', '--url': 'url',
    '-U': 'url_list', '--url-list': 'url_list',
    '-W': 'wordlist', '--wordlist': 'wordlist',
    '-F': 'filter_list', '--filter-list': 'filter_list',
    '-m': 'min_length', '--min-length': 'min_length',
    '-o': 'output', '--output': 'output',
    '-j': 'json', '--json': 'json',
    '-c': 'concurrency', '--concurrency': 'concurrency',
    '-t': 'timeout', '--timeout': 'timeout',
}

REPEATED_OPTIONS = {
    '-w': 'words', '--word': 'words',
    '-f': 'filters', '--filter': 'filters',
}


def parse_args(args):
    options = {
        'url': None,
        'url_list': None,
        'words': [],
        'wordlist': None,
        'filters': [],
        'filter_list': None,
        'min_length': None,
        'output': None,
        'json': None,
        'concurrency': None,
        'timeout': None,
        'verbose': False,
        'silent': False,
    }

    positional = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in VALUE_OPTIONS or arg in REPEATED_OPTIONS:
            if i + 1 >= len(args):
                raise InputError(f"Option {arg} requires a value")
            value = args[i + 1]
            if arg in VALUE_OPTIONS:
                options[VALUE_OPTIONS[arg]] = value
            else:
                options[REPEATED_OPTIONS[arg]].append(value)
            i += 2
            continue
        elif arg in ['-v', '--verbose']:
            options['verbose'] = True
        elif arg in ['-s', '--silent']:
            options['silent'] = True
        elif arg in ['-h', '--help']:
            return 'help', options
        elif arg == '--version':
            return 'version', options
        elif not arg.startswith('-'):
            positional.append(arg)
        else:
            raise InputError(f"Unknown option: {arg}")
        i += 1

    command = positional[0] if positional else None
    return command, options


def _parse_int(value, flag):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InputError(f"Option {flag} expects an integer, got {value!r}")


def build_config(options):
    config = get_default_config()
    if options['timeout'] is not None:
        try:
            config.timeout = float(options['timeout'])
        except ValueError:
            raise InputError(f"Option --timeout expects a number, got {options['timeout']!r}")
    if options['concurrency'] is not None:
        config.max_concurrent = _parse_int(options['concurrency'], '--concurrency')
    config.validate()
    return config


def apply_verbosity(options):
    if options['verbose']:
        set_verbose(True)
    elif options['silent']:
        set_silent(True)


def emit_results(results, request, options):
    report = format_results(results)

    if options['json']:
        try:
            JSONExporter().export(options['json'], results, request)
        except OSError as e:
            logger.error(f"Error writing JSON report to file: {options['json']} {e}")

    if options['output']:
        try:
            write_report(options['output'], report)
            return
        except OSError as e:
            logger.error(f"Error writing output to file: {options['output']} {e}")

    print(report)


def run_dictionary(options):
    """Dictionary mode: search for specific variable names"""
    variables = resolve_variables(options['words'], options['wordlist'])
    urls = resolve_urls(options['url'], options['url_list'])

    request = ExtractionRequest.dictionary(urls, variables)
    config = build_config(options)

    if not options['silent']:
        logger.info(f"Searching {len(urls)} URL(s) for {len(variables)} variable name(s)")

    results = ExtractionRunner(config).run(request)
    emit_results(results, request, options)
    return results


def run_enumeration(options):
    """Enumeration mode: search for all variables"""
    urls = resolve_urls(options['url'], options['url_list'])
    filters = resolve_filters(options['filters'], options['filter_list'])
    min_length = 0
    if options['min_length'] is not None:
        min_length = _parse_int(options['min_length'], '--min-length')

    request = ExtractionRequest.enumeration(urls, filters, min_length)
    config = build_config(options)

    if not options['silent']:
        logger.info(f"Enumerating variables in {len(urls)} URL(s)")

    results = ExtractionRunner(config).run(request)
    emit_results(results, request, options)
    return results


COMMANDS = {
    'dict': run_dictionary,
    'enum': run_enumeration,
}


def main(argv=None):
    init(autoreset=True)
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        print_banner()
        show_help()
        return

    try:
        command, options = parse_args(args)
    except InputError as e:
        print(f"{Fore.RED}[-] Error: {e}{Style.RESET_ALL}", file=sys.stderr)
        sys.exit(1)

    if command == 'help':
        print_banner()
        show_help()
        return
    if command == 'version':
        print(__version__)
        return

    handler = COMMANDS.get(command)
    if handler is None:
        print(f"{Fore.RED}[-] Unknown command: {command}{Style.RESET_ALL}", file=sys.stderr)
        show_help()
        sys.exit(1)

    apply_verbosity(options)
    if not options['silent']:
        print_banner()

    try:
        handler(options)
    except (InputError, ListFileError) as e:
        print(f"{Fore.RED}[-] Error: {e}{Style.RESET_ALL}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(f"\n{Fore.YELLOW}[!] Scan interrupted{Style.RESET_ALL}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Extraction failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
