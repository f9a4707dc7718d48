from google_image_scraper.cli import main

main()
