# API Route Constants

# Base API
API_BASE = '/api'

# User routes
USER_BASE = f'{API_BASE}/user'
USER_CREATE = USER_BASE
USER_LOGIN = f'{USER_BASE}/login'
USER_ME = USER_BASE

# Offer routes
OFFER_BASE = f'{API_BASE}/offer'
OFFER_CREATE = OFFER_BASE
OFFER_MINE = f'{OFFER_BASE}/mine'
OFFER_FEED = f'{OFFER_BASE}/feed'
OFFER_GET = f'{OFFER_BASE}/{{offer_id}}'
OFFER_UPDATE = f'{OFFER_BASE}/{{offer_id}}'
OFFER_DELETE = f'{OFFER_BASE}/{{offer_id}}'

# Subscription routes
SUBSCRIPTION_BASE = f'{API_BASE}/subscription'

# Reservation routes
RESERVATION_BASE = f'{API_BASE}/reservation'
RESERVATION_CREATE = RESERVATION_BASE
RESERVATION_RECEIVED = f'{RESERVATION_BASE}/received'
RESERVATION_MINE = f'{RESERVATION_BASE}/mine'
RESERVATION_CONFIRM = f'{RESERVATION_BASE}/{{reservation_id}}/confirm'
RESERVATION_CANCEL = f'{RESERVATION_BASE}/{{reservation_id}}/cancel'
RESERVATION_RATING = f'{RESERVATION_BASE}/{{reservation_id}}/rating'

# Rating routes
RATING_BASE = f'{API_BASE}/rating'
RATING_PUBLISHER = f'{RATING_BASE}/publisher/{{publisher_id}}'
