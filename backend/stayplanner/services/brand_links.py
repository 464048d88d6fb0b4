"""Brand deep links - search-page URLs used when a hotel has no property page."""

from urllib.parse import quote

from stayplanner.schemas.hotel import Brand, Hotel

TRACKING_PARAMS = "utm_source=trip-planner&utm_medium=web"

BRAND_SEARCH_URLS: dict[Brand, str] = {
    Brand.MARRIOTT: "https://www.marriott.com/search/default.mi?destination={city}&{tracking}",
    Brand.HILTON: "https://www.hilton.com/en/locations/?search={city}&{tracking}",
    Brand.HYATT: "https://www.hyatt.com/en-US/hotelsearch?location={city}&{tracking}",
}


def build_brand_deep_link(hotel: Hotel) -> str:
    city = quote(hotel.city, safe="")
    return BRAND_SEARCH_URLS[hotel.brand].format(city=city, tracking=TRACKING_PARAMS)
