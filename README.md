# labkit

A small collection of systems-programming tools:

- **adder**: a minimal CGI program that adds the two numbers in
  `QUERY_STRING` (for example `15000&213`) and writes the headers and HTML
  body of the answer to standard output.
- **tsh**: a tiny shell with job control (foreground, background and stopped
  jobs; built-in commands `jobs`, `bg`, `fg` and `quit`).
- **myspin**, **myint**, **mystop**, **mysplit**: helper programs for
  exercising a job-control shell.
- **proxy**: prints the User-Agent header line a web proxy sends upstream.

The library side offers:

- `labkit.rio`: buffered robust reads with `RioReader` (`read`, `readline`,
  line iteration) and unbuffered whole-count `readn` and `writen`.
- `labkit.sio`: signal-safe output straight to the standard output
  descriptor (`ltoa`, `puts`, `putl`, `sio_error`).
- `labkit.netio`: `open_clientfd` and `open_listenfd`, which try every
  address a lookup returns and raise `AddressLookupError` when the lookup
  itself fails.
- `labkit.jobs`: the shell's job list (`JobList`, `Job`, `JobState`).
- `labkit.adder`: `parse_query`, `render_content` and `build_response`.

## Install

```
pip install .
```

## Usage

Run the CGI adder by hand:

```
QUERY_STRING='1&2' adder
```

Run the shell, optionally without a prompt (`-p`) or with extra
diagnostics (`-v`); `-h` prints the help message:

```
tsh -p
```

Inside it, try:

```
tsh> /path/to/myspin 5 &
tsh> jobs
tsh> fg %1
```

Programs are started with `execve`, so give the full path of the program.

The helper programs each take a number of seconds:

```
myspin 3
myint 2
mystop 2
mysplit 3
```

Print the proxy's User-Agent header:

```
proxy
```

## What it does not do

The package has no web server of its own: nothing here serves static files
or runs CGI programs such as `adder` in answer to HTTP requests. `proxy`
only prints its header line; it does not forward requests or cache
responses. `open_listenfd` and `RioReader` give the pieces to build such a
server on.

## Tests

```
pip install .[test]
pytest
```