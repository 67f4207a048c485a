# Decoding of the byte streams libpod sends back for exec, attach, logs,
# events and the JSON progress endpoints (pull, build, stats).
#
# When no TTY is attached the daemon multiplexes stdout and stderr over one
# connection. Every frame starts with an 8 byte header: one stream type byte,
# three reserved bytes and a big-endian uint32 payload length. See:
# https://docs.docker.com/engine/api/v1.41/#operation/ContainerAttach
#
# When a TTY is attached there is no framing at all and every byte belongs to
# stdout.

import codecs
from collections import namedtuple
import enum
import json
import logging
import struct

from podman_api import constants
from podman_api import errors
from podman_api import models


LOG = logging.getLogger(__name__)
LOG.setLevel(logging.INFO)


class StreamType(enum.IntEnum):
    STDIN = constants.STREAM_STDIN
    STDOUT = constants.STREAM_STDOUT
    STDERR = constants.STREAM_STDERR


Frame = namedtuple('Frame', ['stream_type', 'payload'])


def encode_frame(stream_type, payload):
    header = struct.pack(constants.STREAM_HEADER_FORMAT,
                         int(stream_type), len(payload))
    return header + bytes(payload)


class FrameDecoder(object):
    """Incrementally split a multiplexed byte stream into frames.

    Bytes are fed in as they arrive. decode_next() returns None whenever
    more input is needed before the next frame is complete.
    """

    def __init__(self):
        self.buffer = bytearray()

    def feed(self, data):
        self.buffer.extend(data)

    def decode_next(self):
        if len(self.buffer) < constants.STREAM_HEADER_SIZE:
            return None

        type_byte, length = struct.unpack_from(
            constants.STREAM_HEADER_FORMAT, self.buffer)
        try:
            stream_type = StreamType(type_byte)
        except ValueError:
            raise errors.FrameDecodeError(
                'Unknown stream type %d in frame header' % type_byte)

        end = constants.STREAM_HEADER_SIZE + length
        if len(self.buffer) < end:
            return None

        payload = bytes(self.buffer[constants.STREAM_HEADER_SIZE:end])
        del self.buffer[:end]
        return Frame(stream_type, payload)

    def finish(self):
        """Signal EOF; leftover bytes mean the last frame was cut short."""
        if self.buffer:
            raise errors.FrameDecodeError(
                'Stream ended with %d bytes of an incomplete frame'
                % len(self.buffer))


def decode_frames(chunks):
    """Yield Frames from an iterable of multiplexed byte chunks.

    Raises:
        FrameDecodeError: A frame header is invalid or the stream ends in the
            middle of a frame. Framing cannot resume after either.
    """
    decoder = FrameDecoder()
    for chunk in chunks:
        decoder.feed(chunk)
        frame = decoder.decode_next()
        while frame is not None:
            yield frame
            frame = decoder.decode_next()
    decoder.finish()


def decode_raw(chunks):
    """Yield each chunk of a TTY stream as a stdout Frame."""
    for chunk in chunks:
        if chunk:
            yield Frame(StreamType.STDOUT, bytes(chunk))


def decode_output(chunks, tty):
    if tty:
        return decode_raw(chunks)
    return decode_frames(chunks)


def demux(frames):
    """Collect frames into (stdout, stderr) byte strings."""
    out = {StreamType.STDOUT: bytearray(), StreamType.STDERR: bytearray()}
    for frame in frames:
        if frame.stream_type in out:
            out[frame.stream_type].extend(frame.payload)
    return bytes(out[StreamType.STDOUT]), bytes(out[StreamType.STDERR])


def split_lines(chunks):
    """Yield complete lines (without the terminator) as bytes.

    Empty lines are skipped. A final line without a terminator is still
    yielded once the stream ends.
    """
    pending = b''
    for chunk in chunks:
        pending += chunk
        lines = pending.split(b'\n')
        pending = lines.pop()
        for line in lines:
            line = line.rstrip(b'\r')
            if line:
                yield line
    pending = pending.rstrip(b'\r')
    if pending:
        yield pending


def decode_lines(chunks):
    """Yield the lines of a stream as text.

    Raises:
        SerializationError: A line is not valid UTF-8.
    """
    for line in split_lines(chunks):
        try:
            text = line.decode('utf-8')
        except UnicodeDecodeError as e:
            raise errors.SerializationError(
                'Line is not valid UTF-8: %s' % e) from e
        yield text


def decode_events(chunks):
    """Yield an Event per line of an events stream.

    A line which is not a valid event yields an EventDecodeError in its
    place rather than raising, so one bad line does not end the stream.
    Callers should check each item with isinstance().
    """
    for raw in split_lines(chunks):
        try:
            line = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            yield errors.EventDecodeError(
                raw.decode('utf-8', errors='replace'), str(e))
            continue

        try:
            data = json.loads(line)
        except ValueError as e:
            LOG.debug('Skipping undecodable event line: %s' % line)
            yield errors.EventDecodeError(line, str(e))
            continue

        if not isinstance(data, dict):
            yield errors.EventDecodeError(line, 'event is not a JSON object')
            continue
        try:
            event = models.Event.from_dict(data)
        except errors.InvalidResponseError as e:
            yield errors.EventDecodeError(line, str(e))
            continue
        yield event


def decode_json_stream(chunks):
    """Yield each JSON value in a stream of concatenated JSON documents.

    libpod writes progress messages back to back, sometimes without any
    separator, and a single message may span several chunks.

    Raises:
        StreamError: A message reports an error.
        SerializationError: The stream ends inside a message or is not
            valid UTF-8.
    """
    decoder = json.JSONDecoder()
    # A multi-byte character may be split across chunks
    text_decoder = codecs.getincrementaldecoder('utf-8')()
    pending = ''
    for chunk in chunks:
        pending += _decode_utf8(text_decoder, chunk)
        while True:
            pending = pending.lstrip()
            if not pending:
                break
            try:
                obj, end = decoder.raw_decode(pending)
            except ValueError:
                # Incomplete document, wait for more input
                break
            pending = pending[end:]
            _raise_for_stream_error(obj)
            yield obj

    pending += _decode_utf8(text_decoder, b'', final=True)
    if pending.strip():
        raise errors.SerializationError(
            'JSON stream ended inside a message: %r' % pending[:80])


def _decode_utf8(decoder, data, final=False):
    try:
        return decoder.decode(data, final=final)
    except UnicodeDecodeError as e:
        raise errors.SerializationError(
            'JSON stream is not valid UTF-8: %s' % e) from e


def _raise_for_stream_error(obj):
    if isinstance(obj, dict) and (obj.get('error') or obj.get('errorDetail')):
        raise models.JsonError.from_dict(obj).to_exception()


class Multiplexer(object):
    """Interactive access to an attached container.

    Iterating yields output Frames until the connection closes. write()
    sends bytes to the container's stdin. The connection is closed when the
    multiplexer is closed or used as a context manager and exited.
    """

    def __init__(self, connection, tty=False):
        self.connection = connection
        self.tty = tty
        self._frames = None

    def __iter__(self):
        if self._frames is None:
            self._frames = decode_output(self.connection.chunks(), self.tty)
        return self._frames

    def write(self, data):
        if isinstance(data, str):
            data = data.encode('utf-8')
        self.connection.write(data)

    def close(self):
        if self._frames is not None:
            self._frames.close()
        self.connection.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
