"""Shared readme samples for the test suite."""

from __future__ import annotations

import pytest

NETWORK_README = """# Network

> see https://aka.ms/autorest

## Getting Started

To build the SDK for Network, simply run AutoRest.

## Configuration

### Basic Information

These are the global settings for the Network API.

``` yaml
openapi-type: arm
tag: package-2023-01
title: NetworkManagementClient
```

### Tag: package-2023-01

These settings apply only when `--tag=package-2023-01` is specified on the command line.

```yaml $(tag) == 'package-2023-01'
input-file:
  - Microsoft.Network/stable/2023-01-01/network.json
```

### Tag: package-2022-05

These settings apply only when `--tag=package-2022-05` is specified on the command line.

```yaml $(tag) == 'package-2022-05'
input-file:
  - Microsoft.Network/stable/2022-05-01/network.json
```
"""


@pytest.fixture
def network_readme() -> str:
    """A readme in the usual spec repository layout."""
    return NETWORK_README
