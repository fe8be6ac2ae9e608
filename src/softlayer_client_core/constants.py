"""Well-known endpoints, names and configuration locations for the SoftLayer API."""

# XML-RPC endpoint reachable from the public internet
API_PUBLIC_ENDPOINT = "https://api.softlayer.com/xmlrpc/v3/"

# XML-RPC endpoint reachable only from the SoftLayer private network
API_PRIVATE_ENDPOINT = "https://api.service.softlayer.com/xmlrpc/v3/"

# Every canonical service name starts with this prefix
SERVICE_NAME_PREFIX = "SoftLayer_"

# Service used to exchange a password for a portal login token
USER_CUSTOMER_SERVICE = "SoftLayer_User_Customer"

# Setting name -> environment variable name
ENVIRONMENT_VARIABLE_KEYS: dict[str, str] = {
    "username": "SL_USERNAME",
    "api_key": "SL_API_KEY",
    "endpoint_url": "SL_API_BASE_URL",
    "user_agent": "SL_API_USER_AGENT",
    "timeout": "SL_API_TIMEOUT",
}

# INI files read in order; later files override earlier ones
CONFIG_FILE_LOCATIONS: tuple[str, ...] = ("/etc/softlayer.conf", "~/.softlayer", "./.softlayer")

CONFIG_FILE_SECTION = "softlayer"

CONFIG_FILE_KEYS: tuple[str, ...] = ("username", "api_key", "endpoint_url", "user_agent", "timeout")
