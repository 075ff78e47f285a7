"""Output sinks for summaries and alert notifications."""

from propfolio.sinks.console import ConsoleSink
from propfolio.sinks.json_file import JsonFileSink
from propfolio.sinks.kafka import KafkaSink
from propfolio.sinks.telegram import TelegramSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink", "TelegramSink"]
