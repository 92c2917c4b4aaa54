"""Tests for the staging facade."""

import logging

from beacon_staging.config import StagingConfig
from beacon_staging.identifiers import RandomSequenceIdGenerator
from beacon_staging.payload import events
from beacon_staging.payload.keys import PayloadKey
from beacon_staging.stager import PayloadStager


class TestIdentifiers:
    def test_default_numbering(self, config):
        stager = PayloadStager(config)

        assert stager.next_session_number() == 0
        assert stager.next_session_number() == 1
        assert stager.next_sequence_number() == 0

    def test_random_session_numbers(self, random_config, scripted_random):
        source = scripted_random(500)
        stager = PayloadStager(random_config, random_source=source)

        assert stager.next_session_number() == 500
        assert stager.next_session_number() == 501
        assert stager.next_sequence_number() == 0

    def test_seeded_random_source(self):
        config = StagingConfig.from_dict({
            "identifiers": {"session_strategy": "random", "random_seed": 3},
        })

        first = PayloadStager(config).next_session_number()
        second = PayloadStager(config).next_session_number()

        assert first == second
        assert isinstance(PayloadStager(config)._session_ids, RandomSequenceIdGenerator)


class TestStaging:
    def test_stage_and_drain_in_order(self, config):
        stager = PayloadStager(config)
        payloads = [
            events.start_session(stager.next_sequence_number()),
            events.named_event("click", 0, stager.next_sequence_number(), 10),
            events.end_session(stager.next_sequence_number(), 20),
        ]

        for payload in payloads:
            assert stager.stage(payload)

        assert stager.peek() == payloads[0]
        assert stager.drain() == payloads
        assert stager.is_empty
        assert stager.drain() == []

    def test_oversized_payload_dropped(self, caplog):
        stager = PayloadStager(StagingConfig.from_dict({"queue": {"max_payload_bytes": 8}}))

        with caplog.at_level(logging.WARNING, logger="beacon_staging.stager"):
            assert not stager.stage("na=" + "€" * 3)

        assert stager.is_empty
        assert stager.stats["dropped"] == 1
        assert "Dropping payload" in caplog.text

    def test_payload_builder_uses_configured_limit(self):
        stager = PayloadStager(StagingConfig.from_dict({"encoding": {"max_value_length": 3}}))

        payload = stager.payload_builder().add(PayloadKey.KEY_NAME, "abcdef").build()

        assert payload == "na=abc"


class TestFlushNotification:
    def test_listener_called_once(self, config):
        stager = PayloadStager(config)
        received = []
        stager.on_flush(received.append)

        stager.complete_flush(True)
        stager.complete_flush(False)

        assert received == [True]

    def test_listener_waits_for_next_flush(self, config):
        stager = PayloadStager(config)
        stager.complete_flush(True)

        received = []
        stager.on_flush(received.append)
        stager.complete_flush(False)

        assert received == [False]

    def test_cancelled_listener_not_called(self, config):
        stager = PayloadStager(config)
        received = []
        stager.on_flush(received.append)
        stager.cancel_flush_listener(received.append)

        stager.complete_flush(True)

        assert received == []

    def test_stats(self, config):
        stager = PayloadStager(config)
        stager.stage("et=18")
        stager.on_flush(lambda ok: None)

        stats = stager.stats
        assert stats["staged"] == 1
        assert stats["queue"]["size"] == 1
        assert stats["flush_listeners"] == 1

        stager.drain()
        stager.complete_flush(True)

        stats = stager.stats
        assert stats["flushes"] == 1
        assert stats["queue"]["popped"] == 1
        assert stats["flush_listeners"] == 0
