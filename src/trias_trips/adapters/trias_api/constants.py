"""Constants for the TRIAS API adapter.

TRIAS is the VDV 431 XML interface for journey planning. The default endpoint
is the EFA-BW instance used by VVS (Stuttgart).
"""

DEFAULT_TRIAS_ENDPOINT = "https://www.efa-bw.de/trias"

TRIAS_NAMESPACE = "http://www.vdv.de/trias"
TRIAS_VERSION = "1.2"

# HTTP headers
DEFAULT_HEADERS = {
    "Content-Type": "text/xml; charset=UTF-8",
    "Accept": "text/xml",
}

# Path from the document root to the repeated TripResult element
TRIP_RESULT_PATH = ("Trias", "ServiceDelivery", "DeliveryPayload", "TripResponse", "TripResult")

# Mode used for timed legs without a service mode
GENERIC_PT_MODE = "pt"
