"""Starter .jsleak.toml template."""

DEFAULT_TOML = """\
# jsleak configuration
version = "1.0"

[scan]
tuning = "strict"         # strict | lenient
# min_confidence = 60     # overrides the preset's confidence floor
# context_radius = 100    # characters of context on each side of a match
concurrency = 1           # parallel content fetches

[tuning]
# Any threshold of the selected preset can be overridden here, e.g.
# token_min_entropy = 4.2
# skip_minified = false

[patterns]
# enable = ["google_api", "json_web_token"]   # empty = all enabled
# disable = ["us_cn_zipcode"]

[feed]
extensions = [".js"]
max_file_size_kb = 2048

[allowlist]
# patterns = ["AIzaSyDUMMY"]

[output]
format = "terminal"       # terminal | json
reveal = false
show_summary = true
"""
