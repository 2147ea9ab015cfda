"""Names of the entries this service owns in the settings store."""

OPTION_NAME_API_KEY = "rest_options_plugin_api_key"
OPTION_NAME_RESTRICTION_TYPE = "rest_options_plugin_restriction_type"
OPTION_NAME_RESTRICTION_LIST = "rest_options_plugin_restriction_list"
