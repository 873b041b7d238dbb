"""
This module is imported from the mskput package __init__.py file
in order to ensure that the options registered here will be available
as soon as the user loads the package.
"""
from mskput._config.config import is_one_of_factory, register_option
from mskput.core.array_algos.putmask import PUT_MODES

# ---------------------------------------------------------------------
# put options

put_mode_doc = """
: str
    Default mode used by mskput when no ``mode`` is passed. Specifies how
    values are drawn when their number differs from the number of falsy
    mask values.
    Valid values: 'repeat', 'non_strict', 'strict', 'broadcast',
    'strict_broadcast'
"""

register_option(
    "put.mode", "repeat", put_mode_doc, validator=is_one_of_factory(PUT_MODES)
)
