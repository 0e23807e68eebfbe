"""SauceNAO search pipeline: query, parse, filter, resolve, aggregate."""
