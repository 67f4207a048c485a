"""Tests for decoding multiplexed, line and JSON streams."""

import datetime
import json
import unittest
from unittest import mock

from podman_api import errors
from podman_api import models
from podman_api import stream
from podman_api.stream import Frame, StreamType


def _event_line(action='start', **extra):
    event = {
        'Type': 'container',
        'Action': action,
        'Actor': {'ID': 'abc123', 'Attributes': {'name': 'web'}},
        'status': action,
        'id': 'abc123',
        'from': 'docker.io/library/alpine:latest',
        'time': 1600000000,
        'timeNano': 1600000000123456789,
    }
    event.update(extra)
    return json.dumps(event).encode('utf-8') + b'\n'


class TestFrames(unittest.TestCase):
    """Tests for multiplexed frame encoding and decoding."""

    def test_encode_frame(self):
        """Test the header is type, three zero bytes and a BE length."""
        self.assertEqual(
            b'\x01\x00\x00\x00\x00\x00\x00\x05hello',
            stream.encode_frame(StreamType.STDOUT, b'hello'))

    def test_single_frame(self):
        data = stream.encode_frame(StreamType.STDERR, b'oops')
        self.assertEqual([Frame(StreamType.STDERR, b'oops')],
                         list(stream.decode_frames([data])))

    def test_two_frames_in_one_chunk(self):
        """Test a stdout then stderr frame arrive in order."""
        data = (b'\x01\x00\x00\x00\x00\x00\x00\x05hello'
                b'\x02\x00\x00\x00\x00\x00\x00\x04oops')
        frames = list(stream.decode_frames([data]))
        self.assertEqual([Frame(StreamType.STDOUT, b'hello'),
                          Frame(StreamType.STDERR, b'oops')], frames)

    def test_decoder_consumes_both_frames(self):
        """Test the decoder buffer is empty after two whole frames."""
        decoder = stream.FrameDecoder()
        decoder.feed(b'\x01\x00\x00\x00\x00\x00\x00\x06hello\n'
                     b'\x02\x00\x00\x00\x00\x00\x00\x05oops\n')
        self.assertEqual(Frame(StreamType.STDOUT, b'hello\n'),
                         decoder.decode_next())
        self.assertEqual(Frame(StreamType.STDERR, b'oops\n'),
                         decoder.decode_next())
        self.assertIsNone(decoder.decode_next())
        self.assertEqual(bytearray(), decoder.buffer)
        decoder.finish()

    def test_frames_split_across_chunks(self):
        """Test frames are reassembled when delivered a byte at a time."""
        data = (stream.encode_frame(StreamType.STDOUT, b'first')
                + stream.encode_frame(StreamType.STDOUT, b'second'))
        chunks = [data[i:i + 1] for i in range(len(data))]
        self.assertEqual([Frame(StreamType.STDOUT, b'first'),
                          Frame(StreamType.STDOUT, b'second')],
                         list(stream.decode_frames(chunks)))

    def test_empty_payload(self):
        data = stream.encode_frame(StreamType.STDOUT, b'')
        self.assertEqual([Frame(StreamType.STDOUT, b'')],
                         list(stream.decode_frames([data])))

    def test_truncated_payload(self):
        """Test a stream ending inside a payload is an error."""
        data = stream.encode_frame(StreamType.STDOUT, b'hello')[:-2]
        with self.assertRaises(errors.FrameDecodeError):
            list(stream.decode_frames([data]))

    def test_truncated_header(self):
        data = stream.encode_frame(StreamType.STDOUT, b'hello')
        gen = stream.decode_frames([data, b'\x01\x00\x00'])
        self.assertEqual(Frame(StreamType.STDOUT, b'hello'), next(gen))
        with self.assertRaises(errors.FrameDecodeError):
            next(gen)

    def test_unknown_stream_type(self):
        with self.assertRaises(errors.FrameDecodeError):
            list(stream.decode_frames([b'\x07\x00\x00\x00\x00\x00\x00\x01x']))

    def test_decoder_waits_for_input(self):
        """Test decode_next returns None until a frame is complete."""
        decoder = stream.FrameDecoder()
        data = stream.encode_frame(StreamType.STDIN, b'abc')
        decoder.feed(data[:4])
        self.assertIsNone(decoder.decode_next())
        decoder.feed(data[4:])
        self.assertEqual(Frame(StreamType.STDIN, b'abc'),
                         decoder.decode_next())
        decoder.finish()

    def test_raw_stream(self):
        """Test TTY output is passed through as stdout unchanged."""
        chunks = [b'\x01\x00 not a header', b'', b'more']
        self.assertEqual([Frame(StreamType.STDOUT, b'\x01\x00 not a header'),
                          Frame(StreamType.STDOUT, b'more')],
                         list(stream.decode_output(chunks, tty=True)))

    def test_demux(self):
        frames = [Frame(StreamType.STDOUT, b'hel'),
                  Frame(StreamType.STDERR, b'oops'),
                  Frame(StreamType.STDOUT, b'lo')]
        self.assertEqual((b'hello', b'oops'), stream.demux(frames))


class TestLines(unittest.TestCase):
    """Tests for decode_lines()."""

    def test_lines(self):
        """Test lines split across chunks with CRLF and blank lines."""
        chunks = [b'first\r\nsec', b'ond\n\n', b'third']
        self.assertEqual(['first', 'second', 'third'],
                         list(stream.decode_lines(chunks)))

    def test_invalid_utf8(self):
        with self.assertRaises(errors.SerializationError):
            list(stream.decode_lines([b'ok\n\xff\xfe\n']))


class TestEvents(unittest.TestCase):
    """Tests for decode_events()."""

    def test_event_fields(self):
        events = list(stream.decode_events([_event_line()]))
        self.assertEqual(1, len(events))
        event = events[0]
        self.assertIsInstance(event, models.Event)
        self.assertEqual('container', event.type)
        self.assertEqual('start', event.action)
        self.assertEqual('abc123', event.actor.id)
        self.assertEqual({'name': 'web'}, event.actor.attributes)
        self.assertEqual('docker.io/library/alpine:latest', event.from_)
        self.assertEqual(1600000000, event.time)
        self.assertEqual(
            datetime.datetime(2020, 9, 13, 12, 26, 40, 123456,
                              tzinfo=datetime.timezone.utc),
            event.timestamp)

    def test_malformed_line_does_not_stop_stream(self):
        """Test a bad line yields an error and decoding continues."""
        chunks = [_event_line('create'), b'{"Type": "container", "Act',
                  b'ion": }\n', _event_line('start')]
        events = list(stream.decode_events(chunks))
        self.assertEqual(3, len(events))
        self.assertEqual('create', events[0].action)
        self.assertIsInstance(events[1], errors.EventDecodeError)
        self.assertIn('"Type"', events[1].line)
        self.assertEqual('start', events[2].action)

    def test_missing_required_field(self):
        line = json.dumps({'Type': 'container', 'Action': 'start',
                           'Actor': {'ID': 'x'}, 'time': 1}).encode()
        events = list(stream.decode_events([line]))
        self.assertIsInstance(events[0], errors.EventDecodeError)
        self.assertIn('timeNano', str(events[0]))

    def test_non_integer_time(self):
        events = list(stream.decode_events([_event_line(time='yesterday')]))
        self.assertIsInstance(events[0], errors.EventDecodeError)

    def test_non_object_line(self):
        events = list(stream.decode_events([b'[1, 2]\n']))
        self.assertIsInstance(events[0], errors.EventDecodeError)

    def test_invalid_utf8_line(self):
        """Test a line which is not UTF-8 is reported, not mangled."""
        bad = _event_line('start').replace(b'start', b'st\xffrt')
        events = list(stream.decode_events([bad, _event_line('stop')]))
        self.assertEqual(2, len(events))
        self.assertIsInstance(events[0], errors.EventDecodeError)
        self.assertIn('utf-8', events[0].reason)
        self.assertEqual('stop', events[1].action)


class TestJsonStream(unittest.TestCase):
    """Tests for decode_json_stream()."""

    def test_concatenated_documents(self):
        """Test documents with and without separators, split mid value."""
        chunks = [b'{"stream": "STEP 1"}{"str', b'eam": "STEP 2"}\n',
                  b'  {"id": "sha256:abc"}']
        self.assertEqual([{'stream': 'STEP 1'}, {'stream': 'STEP 2'},
                          {'id': 'sha256:abc'}],
                         list(stream.decode_json_stream(chunks)))

    def test_error_object(self):
        """Test an embedded error is raised after earlier messages."""
        chunks = [b'{"stream": "pulling"}\n'
                  b'{"error": "pull failed", '
                  b'"errorDetail": {"message": "denied"}}\n']
        gen = stream.decode_json_stream(chunks)
        self.assertEqual({'stream': 'pulling'}, next(gen))
        with self.assertRaises(errors.StreamError) as ctx:
            next(gen)
        self.assertEqual('pull failed', ctx.exception.error)
        self.assertEqual('denied', ctx.exception.detail)

    def test_truncated_document(self):
        with self.assertRaises(errors.SerializationError):
            list(stream.decode_json_stream([b'{"stream": "STEP']))

    def test_character_split_across_chunks(self):
        """Test a multi-byte character split between chunks survives."""
        data = '{"stream": "caf\u00e9 \u2713"}'.encode('utf-8')
        split = data.index(b'\xc3') + 1
        self.assertEqual(
            [{'stream': 'caf\u00e9 \u2713'}],
            list(stream.decode_json_stream([data[:split], data[split:]])))

    def test_invalid_utf8(self):
        with self.assertRaises(errors.SerializationError):
            list(stream.decode_json_stream([b'{"stream": "\xff"}']))

    def test_stream_ends_inside_character(self):
        with self.assertRaises(errors.SerializationError):
            list(stream.decode_json_stream([b'{"stream": "x"}\xc3']))


class TestMultiplexer(unittest.TestCase):
    """Tests for the attach Multiplexer."""

    def test_read_and_write(self):
        conn = mock.MagicMock()
        conn.chunks.return_value = iter(
            [stream.encode_frame(StreamType.STDOUT, b'prompt> ')])

        with stream.Multiplexer(conn, tty=False) as mux:
            self.assertEqual([Frame(StreamType.STDOUT, b'prompt> ')],
                             list(mux))
            mux.write('ls\n')
        conn.write.assert_called_once_with(b'ls\n')
        conn.close.assert_called_once_with()

    def test_tty_output(self):
        conn = mock.MagicMock()
        conn.chunks.return_value = iter([b'raw bytes'])
        mux = stream.Multiplexer(conn, tty=True)
        self.assertEqual([Frame(StreamType.STDOUT, b'raw bytes')], list(mux))
        mux.close()
        conn.close.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
