# progbook

A collection of small, self-contained programs and library modules covering
interfaces, concurrency, shared state and in-place sequence manipulation. You
can import each module and use it on its own, and most of them also have a
command.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library modules

- `progbook.eval` is an arithmetic expression language. `parse(text)` returns an
  `Expr` tree built from `Var`, `Literal`, `Unary`, `Binary` and `Call` nodes.
  - `Expr.check(variables)` validates operators and function arity. It adds the
    names of the variables used to the given set.
  - `Expr.eval(env)` computes the value.
  - `format_expr(expr)` prints the tree fully parenthesised.
  - The functions `pow`, `sin` and `sqrt` are known.
  - Errors are raised as `ExprError`.

  ```python
  from progbook.eval import parse

  expr = parse("pow(x, 3) + pow(y, 3)")
  expr.check(set())
  expr.eval({"x": 9, "y": 10})   # 1729.0
  ```

- `progbook.surface` has these pieces:
  - `parse_and_check(text)` accepts expressions that use only `x`, `y` and `r`.
  - `surface(f)` returns an SVG plot of `f(x, y)`.
  - `corner(f, i, j)` projects one grid corner onto the canvas.
  - `render_plot(query)` returns the status, content type and body for a `/plot` query string.
- `progbook.tempconv` provides the following:
  - The `Celsius` and `Fahrenheit` types.
  - The conversions `c_to_f` and `f_to_c`.
  - `parse_celsius(text)`, which reads values such as `"20C"` or `"212°F"`.
- `progbook.bytecounter` has `ByteCounter`, a file-like writer that counts the
  bytes written to it.
- `progbook.sleep` has two functions:
  - `parse_duration("2h45m")` converts a duration string to seconds.
  - `format_duration(seconds)` goes the other way.
- `progbook.sorting` has a `Track` playlist (`default_tracks()`).
  - `by_artist`, `by_year` and `custom_order` sort it.
  - `format_tracks` shows it as an aligned table.
- `progbook.shop` contains the toy shop:
  - `ShopDatabase` is a mapping from items to prices. Its methods are `listing`, `price` and `handle(path, query)`.
  - `make_server(db, host, port)` builds an HTTP server for it.
  - `format_dollars` formats a price.
- `progbook.xmlselect` has two functions:
  - `select(source, names)` yields the text of the XML elements whose open-element stack contains `names` in order.
  - `contains_all(x, y)` is the ordered-subsequence test it uses.
- `progbook.sha` has two functions:
  - `digest(data, algorithm)` gives the SHA-256, SHA-384 or SHA-512 hex digest.
  - `bits_difference(x, y)` counts the bits that differ between two digests.
- `progbook.cake` has `Shop`, a threaded simulation of bakers, icers and
  inscribers. `Shop.work(runs)` returns the cakes in the order they were finished.
- `progbook.chat` has `ChatServer`, an asyncio TCP chat server that broadcasts
  each client's lines to all connected clients.
- `progbook.countdown` has the following:
  - `run_countdown(count, abort, interval, out)` counts down and launches. It returns `False` if the `abort` event is set first.
  - `launch(out)` prints the launch message.
- `progbook.pipeline` has the stages `counter`, `squarer` and `printer` as
  generators and consumers.
- `progbook.du` has the following:
  - `walk_dir(directory, cancel)` yields file sizes.
  - `disk_usage(roots, cancel)` walks roots in parallel and returns `(files, bytes)`.
  - `format_usage` formats the totals.
- `progbook.thumbnail` uses Pillow to make 128-pixel thumbnails:
  - `thumbnail_image(src)` scales an image.
  - `image_stream(out, inp)` writes a JPEG thumbnail of a stream.
  - `image_file2(outfile, infile)` writes a thumbnail of one file to another.
  - `image_file(infile)` writes `foo.thumb.jpg` next to `foo.jpg` and returns its name.
- `progbook.bank` has `Bank`, a thread-safe single account with `deposit` and
  `balance`.
- `progbook.memo` provides the following:
  - `Memo` is a concurrency-safe memoizing cache. Concurrent calls to `get` for the same key wait for the first computation to finish. Exceptions are cached and raised again. After `close()`, `get` raises `RuntimeError`.
  - `http_get_body(url)` fetches a response body.
  - `sequential` and `concurrent` run a list of URLs through a `Memo`.
- `progbook.slices` has `reverse`, `rotate_left`, `rotate_right`, `deduplicate`,
  `trim_space` and `trim_space_string`.
- `progbook.iterators` has the `Iter` iterator type and these functions: `new`, `empty`,
  `permutation_count` and `permutations`.
- `progbook.utf8rev` has two functions:
  - `reverse_utf8(buffer)` reverses UTF-8 data one character at a time.
  - `describe(buffer)` reports byte and character lengths.
- `progbook.charcount` has two functions:
  - `char_count` counts characters by Unicode `Category` and by UTF-8 encoded length.
  - `word_freq` counts white-space separated words.

## Commands

| Command | What it does |
| --- | --- |
| `progbook-bytecounter` | Shows a writer that counts the bytes it is given |
| `progbook-sleep -period 1.5s` | Sleeps for the given duration |
| `progbook-tempflag -temp 212F` | Prints a temperature given in Celsius or Fahrenheit as Celsius |
| `progbook-surface` | Starts an HTTP server on localhost:8000. `/plot?expr=sin(r)/r` returns an SVG surface |
| `progbook-sorting` | Prints a playlist in several sort orders |
| `progbook-shop` | Starts a toy shop HTTP server with `/list` and `/price?item=socks` |
| `progbook-xmlselect div h2 < page.xml` | Prints the text of matching nested XML elements |
| `progbook-sha -sha384 < file` | Prints the SHA-256 digest of stdin, or SHA-384 or SHA-512 when you ask for one |
| `progbook-chat` | Starts a TCP chat server on localhost:8000 |
| `progbook-countdown` | Runs a rocket launch countdown. Press return to abort, or pass `--no-abort` to disable this |
| `progbook-pipeline --limit 100` | Prints the squares from a counter/squarer/printer pipeline. `--infinite` never stops |
| `progbook-du -v DIR...` | Reports the number of files and the disk usage under the directories. `--interactive` cancels when input arrives |
| `progbook-thumbnail < names.txt` | Writes a `.thumb` thumbnail beside each image file named on stdin |
| `progbook-utf8rev` | Shows UTF-8 byte strings reversed one character at a time |
| `progbook-charcount < file` | Counts characters by Unicode category and encoded length. `--words` counts word frequencies instead |

The servers take `--host` and `--port` options.

## What is not included

The package has no client for talking to the TCP servers. Use any line-based
TCP client, such as `telnet`, to connect to `progbook-chat`.

There is no clock server that writes the time to each connection. There is also
no echo server that repeats lines back, and no spinner animation command.