"""
ZonaProp (www.zonaprop.com.ar) reference code profile.

Listings show "Cód. del anunciante: XXX | Cód. Zonaprop: XXXXXXX" inside a
"publiserCodes-module__publisher-codes-item___..." element.
"""

import re

from scrapers.base import PortalProfile

ZONAPROP = PortalProfile(
    domain="zonaprop.com.ar",
    marker_class="publisher-codes-item",
    label_patterns=(
        re.compile(r'Cód\.\s+del\s+anunciante[:\s]*([A-Za-z0-9_-]+)', re.IGNORECASE),
        re.compile(r'Cód\.\s+Zonaprop[:\s]*(\d+)', re.IGNORECASE),
    ),
    attribute_selectors=(
        ('meta[property="product:retailer_item_id"]', ("content",)),
    ),
)
