# pplay

Building blocks for a media browser front end: cache file paths for media,
a compact binary format for stream information, cleaning of release file
names for searching, and tolerant extraction of forms and links from HTML.
It needs only the standard library.

## Modules

### `pplay.utility`

- `media_cache_key(path)`: a stable decimal key for a media path, taken from
  its SHA-1 digest.
- `get_media_info_path(data_dir, path)`, `get_media_scrap_path(...)`,
  `get_media_poster_path(...)` and `get_media_backdrop_path(...)` give
  `<data_dir>/cache/<key>.info`, `.scrap`, `-poster.jpg` and
  `-backdrop.jpg`.
- `media_extensions()` lists the recognised extensions. `is_media(name, is_file=True)`
  checks a file name against them, ignoring case. It is always false for
  something that is not a file.
- `format_time(seconds)` gives `HH:MM:SS`. Zero or negative input gives
  `00:00:00`.
- `format_time_short(seconds)` leaves out hour and minute fields that are
  zero.
- `format_size(size)` gives a byte count in B, KB, MB or GB, rounded to two
  decimals. A negative size raises `ValueError`.

### `pplay.media_info`

`MediaInfo` holds a title, path, duration, bit rate, lists of video, audio
and subtitle `Track`s, and a `Playback` with the selected stream ids and a
position. `to_bytes()` and `MediaInfo.from_bytes(data)` convert to and from
a little-endian binary format. `save(path)` and `MediaInfo.load(path)` do the
same with a file. Truncated data raises `ValueError`. `describe()` returns a
readable multi-line summary.

### `pplay.scrapper`

- `clean_name(name)` lower-cases a file name and drops its extension. It then
  cuts the name at the last year between 1970 and 2030, or, if there is no
  year, at a release token such as `1080p`, `bluray` or `xvid`.
- `find_medias(root, should_continue=None)` walks a directory tree in name
  order and returns the paths of media files. When the optional callback
  returns False, the walk stops early.

### `pplay.htmltext` and `pplay.htmlscan`

These are small scanners for loosely formed HTML. Matching ignores case and
skips comments. They include `remove_html_comments`, `word_in`,
`replace_all`, `split` and `get_after_equal` (the value of an attribute),
plus `get_after_delimiter`, `get_between_two`, `get_between_two_closed` and
`get_from_intern`. Each of these cuts blocks or tags out of the text.

### `pplay.links`

`LinkList.extract(html)` appends a `Link` for every `<a ... href=...>...</a>`
element. Each `Link` has `url`, `name` (the element's text), `title`,
`target`, `css_class` and `id`. `str(link)` is its URL. `report()` lists one
URL per line. Indexing outside the range returns the last link. Indexing an
empty list raises `IndexError`.

### `pplay.form_model` and `pplay.forms`

`FormSet(html)` parses every `<form>` of a page into a `Form` object. A `Form`
has `url`, `method` (upper case, `GET` by default) and `multipart`, along
with its `inputs` (`InputField`), `selects` (`SelectField` with `Option`s)
and `textareas` (`TextareaField`). `parse_form(raw)` and `split_inputs(raw)`
are also available on their own.

Indexing a `FormSet` returns a copy of the form. An index outside the range
gives the first form, or an empty `Form` when the page has none.

To prepare values for sending, make a `Form` whose `template` is the parsed
form and call `fill(name, value)`. Only names that the template has are
accepted; any other name raises `KeyError`. With `direct_post=True`, every
name becomes a text input instead. `add_bytes(name, content_type)` marks a
field to be sent as raw bytes. `report()` describes a form or a whole
`FormSet`.

## Examples

```python
from pplay.utility import format_time, format_size
from pplay.media_info import MediaInfo, Track

format_time(3725)        # "01:02:05"
format_size(1536)        # "1.5 KB"

info = MediaInfo(title="Film", path="/media/film.mkv", duration=5400)
info.videos.append(Track(id=1, type="video", codec="h264", width=1920, height=1080))
info.save("film.info")
assert MediaInfo.load("film.info").videos[0].width == 1920
```

```python
from pplay.scrapper import clean_name

clean_name("Some.Movie.2019.1080p.mkv")   # "some.movie"
```

```python
from pplay.form_model import Form
from pplay.forms import FormSet
from pplay.links import LinkList

html = '<form action="/login" method="post"><input type="text" name="user"></form>'
forms = FormSet(html)
print(forms.report())

filled = Form(template=forms[0])
filled.fill("user", "alice")
print(filled.url, filled.method)          # /login POST

links = LinkList()
links.extract('<p><a href="/next" title="Next">Next page</a></p>')
print(links[0].url, links[0].name)        # /next Next page
```

## What it does not do

This is a library only. It has no command, no player, no video output and
no menus or other screens. It does not search any online service or
download posters and backdrops: `pplay.scrapper` only finds media files and
cleans their names. It also does not send the forms it parses.

## Install and test

```
pip install .[test]
pytest
```