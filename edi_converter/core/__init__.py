"""Core model, errors, and conversion orchestrator.

WHY: The core package is the stable heart of the converter — the IR
dataclasses, the typed errors, and the orchestration that routes a
document through the codecs. The HTTP layer and CLI are thin callers.

HOW: model.py defines the data structures, errors.py the error hierarchy,
converter.py the conversion entry points.

RULES:
- IR dataclasses are the contract between codecs — change with care
- Orchestration is format-agnostic — no codec-specific logic here
"""
