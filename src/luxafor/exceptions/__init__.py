"""
Custom exception hierarchy for Luxafor.

## Exception Hierarchy

```
LuxaforError (base)
├── OutOfRangeError
├── DeviceError
│   ├── UseAfterDisposeError
│   ├── DeviceNotFoundError
│   └── TransportError
│       └── TransportTimeoutError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

## Usage

All custom exceptions inherit from `LuxaforError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Out of range value

```python
from luxafor import Color, OutOfRangeError

try:
    Color(r=300, g=0, b=0)
except OutOfRangeError as e:
    print(e.user_message)  # "'r' must be between 0 and 255, got 300"
```

Range checks happen when a value is built, never when a packet is
serialized, so a failed check guarantees nothing was written to the device.
"""

from .base import LuxaforError, OutOfRangeError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import (
    DeviceError,
    DeviceNotFoundError,
    TransportError,
    TransportTimeoutError,
    UseAfterDisposeError,
)
from .handlers import config_error_from_validation, format_error_for_display

__all__ = [
    # Base
    "LuxaforError",
    "OutOfRangeError",
    # Device
    "DeviceError",
    "DeviceNotFoundError",
    "TransportError",
    "TransportTimeoutError",
    "UseAfterDisposeError",
    # Config
    "ConfigurationError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Handlers
    "config_error_from_validation",
    "format_error_for_display",
]
