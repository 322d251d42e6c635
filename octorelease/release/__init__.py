"""The "Octopus Create Release" build step.

Modules:
- validation: field-level feedback on the global settings
- arguments: octo.exe command line construction
- macros: build-variable substitution
- launcher: the machine octo.exe runs on
- step: preconditions, execution and result mapping
- errors: step failure values
"""

from __future__ import annotations
