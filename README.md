# remotecache

Building blocks for a remote build cache that speaks the REAPI cache
protocols. The package uses only the standard library and runs on POSIX
systems (`remotecache.rlimit` needs the `resource` module).

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## What is in it

- `remotecache.sha256verifier.Sha256Verifier(expected_hash, expected_size, sink)`
  passes every `write()` through to `sink` while hashing it. `close()`
  raises `ValueError` if the byte count or the SHA-256 hash differs from
  what was expected, and closes the sink only when both match. It is also
  a context manager: leaving the block normally calls `close()`, leaving
  it with an exception just closes the sink.
- `remotecache.tempfiles.TempFileCreator(seed=None)` creates files named
  `<base>-<random>` (with a `.v1` suffix when `legacy=True`) exclusively,
  retrying on name collisions. `create()` returns the open binary file
  and the random part of its name. New files carry the setgid bit to mark
  them incomplete; chmod them to `remotecache.tempfiles.FINAL_MODE`
  (`0o664`) once written.
- `remotecache.idle.IdleTimer(timeout, on_idle)` checks once a second,
  after `start()`, whether `reset()` has been called within the last
  `timeout` seconds, and calls `on_idle` once when it has not. `stop()`
  ends the watch without calling it.
- `remotecache.idle_interceptors.IdleTimerInterceptor(idle_timer)` has
  `unary_interceptor()` and `stream_interceptor()`, which reset the timer
  and then call the given handler.
- `remotecache.validate` holds the `ActionResult`, `Digest`, `OutputFile`,
  `OutputDirectory` and `OutputSymlink` dataclasses.
  `validate_action_result()` raises `ValidationError` describing the first
  malformed field (missing entries, empty or absolute paths, empty symlink
  targets, negative sizes, bad hashes) and otherwise returns its argument.
  `is_valid_hash()` checks for a lower case hex SHA-256 sum.
- `remotecache.backendproxy.start_uploaders(uploader, num_uploaders, max_queued_uploads)`
  starts daemon worker threads that take `UploadRequest` items from a
  bounded `queue.Queue` and hand them to `uploader.upload_file()`. It
  returns the queue, or `None` if either number is not positive.
  Subclass `Uploader` to provide `upload_file()`.
- `remotecache.http.parse_request_url(url, validate_ac)` splits a path
  such as `instance/ac/<sha256>` into `(EntryKind, hash, instance)`.
  Action cache paths give `EntryKind.AC` when `validate_ac` is true and
  `EntryKind.RAW` otherwise; other paths raise `RequestURLError`.
  `entry_path()` builds `/<kind>/<hash>`, and `EMPTY_SHA256` is the hash
  of the empty blob.
- `remotecache.usage` formats help text: `wrap()` and `wrap_line()` wrap
  at word boundaries, `console_width()` reads `$COLUMNS` or asks
  `tput cols` (never narrower than 30), and `print_help(program, options, out)`
  writes a help page for a list of `Option`s, adding `--help, -h`.
- `remotecache.rlimit.raise_open_file_limit()` sets the open-file soft
  limit to the hard limit (capped by `kern.maxfilesperproc` on macOS),
  logging failures, and returns the new limit or `None`.
- `remotecache.annotate.annotate(prefix, err, context_error=None)` returns
  an exception reading `prefix: err`, with `(context_error)` appended when
  given, chained from `err`.
- `remotecache.testutils` gives `random_data_and_hash()`,
  `random_data_and_digest()` and `silent_logger()` for tests.

## Example

    from remotecache.http import EntryKind, parse_request_url

    kind, key, instance = parse_request_url(
        "prefix/ac/" + "fe" * 32, validate_ac=True
    )
    assert kind is EntryKind.AC
    assert instance == "prefix"

## What it does not do

This package is a set of parts, not a cache server. It has no disk
storage or eviction, no HTTP or gRPC server and request handlers, no
proxy backend clients, no configuration loading and no command-line
program to run.