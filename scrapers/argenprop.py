"""
ArgenProp (www.argenprop.com) reference code profile.
"""

import re

from scrapers.base import PortalProfile

# "Código de aviso: 6KX2_1" inside an element with class "property-code"
ARGENPROP = PortalProfile(
    domain="argenprop.com",
    marker_class="property-code",
    label_patterns=(
        re.compile(r'Código\s+de\s+aviso[:\s]*([A-Za-z0-9_-]+)', re.IGNORECASE),
    ),
    attribute_selectors=(
        ("[data-item-id], [data-property-id]", ("data-item-id", "data-property-id")),
    ),
)
