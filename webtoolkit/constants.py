"""
# Web Toolkit: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

BBCODE_FILE_EXTENSION = '.bbcode'

DEFAULT_REQUEST_TIMEOUT = 30
DEFAULT_DOWNLOAD_DIRECTORY = 'upload'
DOWNLOAD_CHUNK_SIZE = 8192

IMGUR_CLIENT_ID_ENVIRONMENT_VARIABLE = 'IMGUR_CLIENT_ID'

RANDOM_CHARACTERS = 'abcdefghijklmnopqrstuvwxyz1234567890'
RANDOM_LETTERS = 'abcdefghijklmnopqrstuvwxyz'
RANDOM_DIGITS = '0123456789'

YOUTUBE_DETAILS_URL = 'http://gdata.youtube.com/feeds/api/videos/{youtube_id}?v=2&alt=json'
YOUTUBE_EMBED_URL = '//www.youtube-nocookie.com/embed/{youtube_id}?'
VIMEO_DETAILS_URL = 'http://vimeo.com/api/v2/video/{vimeo_id}.json'
VIMEO_EMBED_URL = '//player.vimeo.com/video/{vimeo_id}/?'
IMGUR_UPLOAD_URL = 'https://api.imgur.com/3/image.json'
GRAVATAR_URL = 'http://www.gravatar.com/avatar/{email_hash}?size={size}'
FACEBOOK_GRAPH_URL = 'http://graph.facebook.com/{page_id}'
GOOGLE_DOCS_VIEWER_URL = 'http://docs.google.com/gview?url={source}&embedded=true'

BBCODE_RULES = (
    (
        'image',
        r'\[img\] ( https?:// .*? \. (?i: jpg | jpeg | gif | png | bmp ) ) \[/img\]',
        '<img src="$1" alt="" />',
    ),
    (
        'quote',
        r'\[quote\] ( .*? ) \[/quote\]',
        '<pre>$1</pre>',
    ),
    (
        'bold',
        r'\[b\] ( .*? ) \[/b\]',
        '<b>$1</b>',
    ),
    (
        'size',
        r'\[size= ( .*? ) \] ( .*? ) \[/size\]',
        '<span style="font-size:$1px;">$2</span>',
    ),
    (
        'italic',
        r'\[i\] ( .*? ) \[/i\]',
        '<i>$1</i>',
    ),
    (
        'url',
        r'\[url\] ( (?: ftp | https? ) :// .*? ) \[/url\]',
        '<a href="$1">$1</a>',
    ),
    (
        'underline',
        r'\[u\] ( .*? ) \[/u\]',
        '<span style="text-decoration:underline;">$1</span>',
    ),
    (
        'color',
        r'\[color= ( .*? ) \] ( .*? ) \[/color\]',
        '<span style="color:$1;">$2</span>',
    ),
)

YOUTUBE_ID_PATTERNS = (
    r'(?<= [v|vi]= ) [a-zA-Z0-9-]+ (?= & )',
    r'(?<= vi/ ) [a-zA-Z0-9-]+',
    r'(?<= v/ ) [^&\n]+',
    r'(?<= [v|vi]= ) [^&\n]+',
    r'(?<= embed/ ) [^"&\n]+',
    r'(?<= youtu.be/ ) [^&\n/]+',
)
