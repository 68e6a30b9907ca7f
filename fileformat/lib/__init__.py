"""
Library modules shared by the detection core: structured stream reading, configuration through
environment variables, logging, and the optional libmagic interface.
"""
