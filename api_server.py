"""
Flask API server for the Phone Reveal Scraper
Given a page URL, reveals and returns the seller's phone number
"""
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from config import get_config
from phone_scraper import PhoneScraper, PhoneNumberNotFound

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Allow cross-origin requests from any origin


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({"status": "healthy", "service": "Phone Reveal Scraper API"}), 200


@app.route('/api/get-data', methods=['GET'])
def get_data():
    """
    Phone lookup endpoint
    Query params:
        pageUrl: listing page to scrape (required)
    """
    page_url = request.args.get('pageUrl', '')

    if not page_url:
        return jsonify({"message": "URL is required"}), 400

    try:
        scraper = PhoneScraper()
        phone_number = scraper.get_phone_number(page_url)
    except PhoneNumberNotFound:
        return jsonify({"message": "Phone number not found"}), 404
    except Exception:
        logger.exception("Error fetching phone number from %s", page_url)
        return jsonify({"message": "Error fetching phone number"}), 500

    return jsonify({"phoneNumber": phone_number}), 200


if __name__ == '__main__':
    config = get_config()
    logging.basicConfig(
        level=config["logging"]["level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host = config["server"]["host"]
    port = config["server"]["port"]

    logger.info("Server is running on %s%s", config["server"]["app_url"], port)
    logger.info("Health check: http://%s:%s/health", host, port)
    logger.info("Lookup endpoint: http://%s:%s/api/get-data?pageUrl=...", host, port)

    app.run(host=host, port=port, debug=False, threaded=True)
