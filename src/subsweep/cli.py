import argparse
import sys
import time

from .config import logger, configure_logging, load_settings, DEFAULT_WORDLIST, OUTPUT_FORMATS, RESOLVERS
from .errors import ResolverInitError, SerializationError, WordlistError
from .scan import run_scan
from .utils.output_utils import render, write_output
from .utils.wordlist_utils import load_wordlist, parse_wordlist


def build_parser(settings):
    parser = argparse.ArgumentParser(prog="subsweep",
                                     description="Fast concurrent DNS brute forcing of subdomains.",
                                     formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("-d", "--domain", required=True, help="Target domain (e.g., example.com)")
    parser.add_argument("-w", "--wordlist", help="Path or http(s) URL of the wordlist, one label per line.\n"
                                                 "If not provided, a small built-in list is used.")
    parser.add_argument("-r", "--resolver", default=settings['resolver'],
                        help=f"Resolver to query: {', '.join(sorted(RESOLVERS))} (default: {settings['resolver']}).\n"
                             "Unknown names fall back to google.")
    parser.add_argument("-o", "--output", default="txt", choices=OUTPUT_FORMATS, help="Output format (default: txt).")
    parser.add_argument("-f", "--file", help="Output file path. Results are printed to stdout if omitted.")
    parser.add_argument("-t", "--threads", type=int, default=settings['threads'],
                        help="Maximum concurrent lookups (default: one per word, at most 200).")
    parser.add_argument("--timeout", type=float, default=settings['timeout'],
                        help=f"Seconds allowed per lookup (default: {settings['timeout']}).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging (display debug messages).")
    return parser


def progress_printer(total, stream=None):
    stream = stream or sys.stderr

    def on_progress(done):
        percent = (done / total) * 100 if total else 100.0
        stream.write(f"\r [.] Brute-force Progress: {percent:.2f}% ({done}/{total})")
        stream.flush()

    return on_progress


def main(argv=None):
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)
    configure_logging(args.verbose)

    if args.threads is not None and args.threads < 1:
        logger.error("--threads must be a positive integer.")
        return 1

    try:
        if args.wordlist:
            words = parse_wordlist(load_wordlist(args.wordlist, timeout=args.timeout))
        else:
            logger.info("No wordlist provided. Using the built-in list.")
            words = list(DEFAULT_WORDLIST)
    except WordlistError as e:
        logger.error(f" [!] {e}")
        return 1

    logger.info(f"Domain: {args.domain}")
    logger.info(f"Resolver: {args.resolver}")
    logger.info(f"Words: {len(words)}")
    logger.info(f"Output format: {args.output}")
    if args.file:
        logger.info(f"Output file: {args.file}")

    started = time.monotonic()
    try:
        scan = run_scan(words, args.domain, resolver_name=args.resolver,
                        on_progress=progress_printer(len(words)),
                        threads=args.threads, timeout=args.timeout)
    except ResolverInitError as e:
        logger.critical(f" [!] {e}")
        return 1
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        logger.warning(" [!] Scan aborted by user.")
        return 130
    sys.stderr.write("\n")

    logger.info(f"[*] Brute forcing was done in {time.monotonic() - started:.1f}s. Found {len(scan)} subdomains.")

    try:
        output = render(scan, args.output)
    except SerializationError as e:
        logger.error(f" [!] {e}")
        return 1

    if args.file:
        try:
            write_output(output, args.file)
        except OSError as e:
            logger.error(f" [!] Could not write results to {args.file}: {e}")
            return 1
    elif output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
