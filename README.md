# vimbcore

The non-graphical core of a vim-like web browser, as a plain Python library.
It holds the logic that decides what a command line means and what happens to
bookmarks, the URI queue, auto commands, URI handlers and response headers.

## What is inside

- `vimbcore.ex_parse` parses ex command lines such as `:3open example.com`.
  `parse_ex(text)` yields one `ExArg` per command (with `code`, `count`,
  `bang`, `lhs`, `rhs` and `nohist`). `parse_command_name(text)` resolves
  abbreviated names; ambiguous ones go to the command listed first in
  `ExCode`. `complete_command_names(prefix)` lists matching names. Unknown
  commands raise `ExParseError`.
- `vimbcore.autocmd` manages `:augroup` and `:autocmd` definitions through
  `AutocmdManager`. It has `augroup(name, delete)`, `add(line, delete)`,
  `run(event, uri, group)`, `complete_groups(prefix)` and
  `complete_events(prefix)`. `run` calls the optional runner given to the
  constructor with each matching ex command string and returns the commands
  it ran. `event_bits(name)` turns a comma separated list of `AuEvent` names
  into bits. It raises `ValueError` on an unknown name.
- `vimbcore.bookmark` keeps the tab separated bookmark file (`BookmarkFile`
  with `add`, `remove`, `load`, `complete` and `complete_tags`). Each entry
  is a `Bookmark` whose `matches(query)` does tag prefix matching. Untagged
  bookmarks fall back to the parts of the URI. The module also holds the
  file backed read-it-later queue `UriQueue` (`push`, `unshift`, `pop`,
  `clear`).
- `vimbcore.command` dispatches the queue commands:
  `run_queue_command(queue, action, uri, current_uri)` with a `QueueAction`
  returns a `QueueResult` holding `success`, `message` and the popped `uri`.
- `vimbcore.hints` validates hint prompts like `;o` or `g;y`.
  `parse_hint_prompt(prompt, queue)` returns a `HintPrompt` (`mode`, `gmode`,
  `filter`, `prompt_length`), or `None` for an invalid prompt.
- `vimbcore.handlers` maps URI schemes to command templates with
  `HandlerRegistry`: `add`, `remove`, `lookup`, `command_for` (substitutes
  `%s` with the URI) and `complete`.
- `vimbcore.arh` parses auto-response-header rules into `HeaderRule` objects
  with `parse_rules(data)`. It raises `ArhSyntaxError` on bad input.
  `apply_rules(rules, uri, headers)` applies them to a mutable header mapping.

## Example

```python
from vimbcore.bookmark import BookmarkFile
from vimbcore.ex_parse import parse_ex
from vimbcore.hints import parse_hint_prompt
from vimbcore.handlers import HandlerRegistry

bookmarks = BookmarkFile("bookmarks")
bookmarks.add("https://example.com/docs", "Docs", "work reference")
print([bm.uri for bm in bookmarks.complete("wo")])

for arg in parse_ex("3o example.com"):
    print(arg.code, arg.count, arg.rhs)

print(parse_hint_prompt(";o", queue=True))

handlers = HandlerRegistry()
handlers.add("mailto", "mail-client %s")
print(handlers.command_for("mailto:someone@example.com"))
```

## What this package does not do

- It has no browser engine, window, input box or completion list. Completion
  functions return lists for a caller to show.
- It parses ex command lines, but it does not execute them. There is no
  command runner that maps an `ExCode` to an action. The caller does that.
- It never starts external programs. `HandlerRegistry.command_for` only
  builds the command line.
- It has no command-line entry point.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```