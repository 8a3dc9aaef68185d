"""G-Cloud supplier directory on the UK Digital Marketplace."""

from supplier_scraper.base import DirectoryScraper
from supplier_scraper.models import Selectors


class GCloudScraper(DirectoryScraper):
    """Scraper for the G-Cloud suppliers A-Z directory."""

    directory_name = "G-Cloud"
    base_url = "https://www.digitalmarketplace.service.gov.uk/g-cloud/suppliers"

    selectors = Selectors(
        navigation="#global-atoz-navigation",
        result_title=".search-result-title",
        next_page=".next",
        name="#content > header > h1",
        description="p.supplier-description",
        # Contact name sits in the second paragraph of the meta block
        contact_name="#meta > div > p:nth-child(2) > span > span",
        contact_block=".contact-details-block",
        contact_type_attr="itemprop",
    )
