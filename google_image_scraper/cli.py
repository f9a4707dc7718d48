import argparse

from google_image_scraper.collector import EMOJI_CHECK, EMOJI_ERROR, EMOJI_INFO, scrape_images
from google_image_scraper.data_model import DEFAULT_DELAY, DEFAULT_OUTPUT_DIR, ScrapeConfig

BANNER = (
    "--------------------------------------------\n"
    "   📷 Google Image Scraper 🌐\n"
    "--------------------------------------------"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Google Image Scraper and Downloader CLI")
    parser.add_argument("query", type=str, nargs="?", help="The search query for images. Prompted for if omitted.")
    parser.add_argument("--limit", type=str, default=None, help="The number of images to download. Prompted for if omitted.")
    parser.add_argument("--output-dir", type=str, default=DEFAULT_OUTPUT_DIR, help="The directory to save downloaded images.")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY, help="Seconds to wait between image downloads.")
    parser.add_argument("--keep-partial", action="store_true", help="Keep images downloaded before a results page fails.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    parser.add_argument("--debug", action="store_true", help="Print debug output.")
    return parser


def get_user_input(query=None, limit=None):
    """Prompts for whatever the command line didn't supply, query first."""
    if query is None:
        query = input("Enter a search query: ")
    if limit is None:
        limit = input("Enter the limit (number of images to download): ")
    return query, limit


def main(argv=None):
    args = build_parser().parse_args(argv)

    print(BANNER)
    try:
        query, limit = get_user_input(args.query, args.limit)
    except (EOFError, KeyboardInterrupt):
        print(f"\n{EMOJI_ERROR} No input received.")
        return

    config = ScrapeConfig(
        query=query,
        limit=limit,
        output_dir=args.output_dir,
        delay=args.delay,
        keep_partial=args.keep_partial,
        show_progress=not args.no_progress,
        debug=args.debug,
    )

    print(f"{EMOJI_INFO} Starting image scraping...")
    outcome = scrape_images(config)

    if outcome.succeeded:
        print(f"{EMOJI_CHECK} Image scraping completed successfully.")
    else:
        print(f"{EMOJI_ERROR} No images were scraped.")


if __name__ == "__main__":
    main()
