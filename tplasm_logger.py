"""
Logging utilities for the template assembler.

This module provides logging functions that respect the GenerationContext
settings (log_level and log_rich_format).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import sys
import time
from typing import Optional

from tplasm_context import GenerationContext, LogLevel


def log(context: Optional[GenerationContext], log_level: LogLevel, message: str) -> None:
    """
    Log a message if the context admits the given level.

    Args:
        context:    The generation context containing the logging level.
        log_level:  The level of the message to log.
        message:    The message to log.
    """
    if context is None:
        print("No context provided for logging.", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        return
    prefix = ""
    if context.log_rich_format:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = {
            LogLevel.ERROR: f"{timestamp} [ERROR] ",
            LogLevel.WARNING: f"{timestamp} [WARNING] ",
            LogLevel.INFO: f"{timestamp} [INFO] ",
            LogLevel.DEBUG: f"{timestamp} [DEBUG] ",
        }.get(log_level, "")
    if context.log_level >= log_level:
        print(f"{prefix}{message}", file=sys.stderr)


def log_debug(context: Optional[GenerationContext], message: str) -> None:
    """Log a debug-level message."""
    log(context, LogLevel.DEBUG, message)


def log_stage(context: Optional[GenerationContext], stage: str, unit: Optional[str] = None) -> None:
    """
    Log the start of a generation stage.

    Args:
        context: The generation context containing logging flags.
        stage: The name of the stage (e.g., "Assembling").
        unit: Optional name of the unit being generated.
    """
    if unit:
        log(context, LogLevel.INFO, f"{stage} unit '{unit}'")
    else:
        log(context, LogLevel.INFO, f"{stage}...")
