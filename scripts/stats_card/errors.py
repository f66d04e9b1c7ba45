#------------------------------------------------------------
#                          errors.py
#      Error variants raised by the stats card pipeline.

class StatsCardError(RuntimeError):
    pass

# Required environment values are missing.
class ConfigError(StatsCardError):
    pass

# The GraphQL request failed or returned an unusable payload.
class UpstreamError(StatsCardError):
    pass

# The SVG renderer raised while building the card.
class RenderError(StatsCardError):
    pass
