"""octorelease - create Octopus Deploy releases from a CI build step."""

__version__ = "0.1.0"
