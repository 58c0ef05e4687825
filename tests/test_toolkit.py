"""
# Web Toolkit: test_toolkit.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `toolkit.py`.
"""

import os
import tempfile
import unittest
from unittest import mock

import requests

from webtoolkit.constants import IMGUR_UPLOAD_URL
from webtoolkit.exceptions import MissingClientIdException
from webtoolkit.fetching import Fetcher
from webtoolkit.toolkit import (
    Toolkit,
    build_file_path,
    build_random_file_name,
    normalise_meta_name,
    parse_meta_tags,
    parse_title,
)

PAGE_HTML = '''\
<!DOCTYPE html>
<html>
<head>
<title>A Page Title</title>
<meta name="Description" content="About the page">
<meta name="og:title" content="Open Graph Title">
<meta name="og:site name" content="Site">
<meta name="keywords" content="first">
<meta name="keywords" content="second">
<meta charset="utf-8">
</head>
<body></body>
</html>
'''


class TestToolkitFunctions(unittest.TestCase):
    def test_build_random_file_name(self):
        file_name = build_random_file_name()
        self.assertTrue(file_name.isdigit())
        self.assertGreaterEqual(len(file_name), 7)

    def test_build_file_path(self):
        self.assertEqual(build_file_path('upload', 'pic', 'png'), os.path.join('upload', 'pic.png'))
        self.assertEqual(build_file_path('upload', 'pic', ''), os.path.join('upload', 'pic'))

    def test_normalise_meta_name(self):
        self.assertEqual(normalise_meta_name('Description'), 'description')
        self.assertEqual(normalise_meta_name('og:title'), 'og_title')
        self.assertEqual(normalise_meta_name(' og:site name '), 'og_site_name')
        self.assertEqual(normalise_meta_name('X-UA-Compatible'), 'x-ua-compatible')

    def test_parse_meta_tags(self):
        self.assertEqual(
            parse_meta_tags(PAGE_HTML),
            {
                'description': 'About the page',
                'og_title': 'Open Graph Title',
                'og_site_name': 'Site',
                'keywords': 'second',
            },
        )
        self.assertEqual(parse_meta_tags('<p>no metas</p>'), {})

    def test_parse_title(self):
        self.assertEqual(parse_title(PAGE_HTML), 'A Page Title')
        self.assertIsNone(parse_title('<html><head></head></html>'))


class TestToolkit(unittest.TestCase):
    def setUp(self):
        self.fetcher = mock.Mock(spec=Fetcher)
        self.toolkit = Toolkit(imgur_client_id='client-id', fetcher=self.fetcher)

    def test_imgur_client_id_from_environment(self):
        with mock.patch.dict(os.environ, {'IMGUR_CLIENT_ID': 'from-environment'}):
            self.assertEqual(Toolkit(fetcher=self.fetcher).imgur_client_id, 'from-environment')
        with mock.patch.dict(os.environ, {'IMGUR_CLIENT_ID': 'from-environment'}):
            self.assertEqual(Toolkit('explicit', fetcher=self.fetcher).imgur_client_id, 'explicit')

    def test_default_fetcher(self):
        self.assertIsInstance(Toolkit(imgur_client_id='x').fetcher, Fetcher)

    def test_get_youtube_details(self):
        self.fetcher.fetch_json.return_value = {'entry': {'title': {'$t': 'A Title'}}}

        details = self.toolkit.get_youtube_details('abc123')

        self.assertEqual(details.title, 'A Title')
        self.assertIsNone(details.view_count)
        self.fetcher.fetch_json.assert_called_once_with(
            'http://gdata.youtube.com/feeds/api/videos/abc123?v=2&alt=json'
        )

    def test_get_vimeo_details(self):
        self.fetcher.fetch_json.return_value = [{'id': 123, 'title': 'A Title'}]

        self.assertEqual(self.toolkit.get_vimeo_details('123'), [{'id': 123, 'title': 'A Title'}])
        self.fetcher.fetch_json.assert_called_once_with('http://vimeo.com/api/v2/video/123.json')

    def test_fb_detail(self):
        self.fetcher.fetch_json.return_value = {'id': '20531316728', 'name': 'Facebook'}

        self.assertEqual(self.toolkit.fb_detail('facebook'), {'id': '20531316728', 'name': 'Facebook'})
        self.fetcher.fetch_json.assert_called_once_with('http://graph.facebook.com/facebook')

    def test_upload_image(self):
        self.fetcher.post_json.return_value = {'success': True, 'data': {'link': 'http://i.imgur.com/x.png'}}

        self.assertEqual(self.toolkit.upload_image('http://x.com/a.png'), 'http://i.imgur.com/x.png')
        self.fetcher.post_json.assert_called_once_with(
            IMGUR_UPLOAD_URL,
            data={'image': 'http://x.com/a.png'},
            headers={'Authorization': 'Client-ID client-id'},
        )

    def test_upload_image_explicit_client_id(self):
        self.fetcher.post_json.return_value = {'success': True, 'data': {'link': 'http://i.imgur.com/x.png'}}

        self.toolkit.upload_image('http://x.com/a.png', client_id='other')
        self.assertEqual(
            self.fetcher.post_json.call_args.kwargs['headers'],
            {'Authorization': 'Client-ID other'},
        )

    def test_upload_image_failure(self):
        self.fetcher.post_json.return_value = {'success': False, 'data': {'error': 'Invalid URL'}}

        with self.assertLogs('webtoolkit.toolkit', level='WARNING'):
            self.assertIsNone(self.toolkit.upload_image('http://x.com/a.png'))

    def test_upload_image_missing_client_id(self):
        with mock.patch.dict(os.environ, clear=True):
            toolkit = Toolkit(fetcher=self.fetcher)

        with self.assertRaises(MissingClientIdException):
            toolkit.upload_image('http://x.com/a.png')
        self.fetcher.post_json.assert_not_called()

    def test_get_title(self):
        self.fetcher.fetch.return_value = PAGE_HTML

        self.assertEqual(self.toolkit.get_title('http://x.com'), 'A Page Title')
        self.fetcher.fetch.assert_called_once_with('http://x.com')

    def test_get_meta(self):
        self.fetcher.fetch.return_value = PAGE_HTML

        self.assertEqual(self.toolkit.get_meta('description', 'http://x.com'), 'About the page')
        self.assertEqual(self.toolkit.get_meta('Description', 'http://x.com'), 'About the page')
        self.assertEqual(self.toolkit.get_meta('og:title', 'http://x.com'), 'Open Graph Title')
        self.assertEqual(self.toolkit.get_meta('og_title', 'http://x.com'), 'Open Graph Title')
        self.assertEqual(self.toolkit.get_meta('og:site name', 'http://x.com'), 'Site')
        self.assertIsNone(self.toolkit.get_meta('author', 'http://x.com'))

    def test_download_file(self):
        self.fetcher.fetch_chunks.side_effect = lambda url: iter([b'ab', b'cd'])

        with tempfile.TemporaryDirectory() as directory:
            self.assertTrue(self.toolkit.download_file('http://x.com/a/b.png?size=1', directory, 'pic'))
            with open(os.path.join(directory, 'pic.png'), 'rb') as file:
                self.assertEqual(file.read(), b'abcd')

            self.assertTrue(self.toolkit.download_file('http://x.com/a/b.png', directory, 'pic'))
            file_names = sorted(os.listdir(directory))
            self.assertEqual(len(file_names), 2)
            self.assertIn('pic.png', file_names)
            renamed_file_name = next(file_name for file_name in file_names if file_name != 'pic.png')
            self.assertTrue(renamed_file_name.startswith('pic'))
            self.assertTrue(renamed_file_name.endswith('.png'))

    def test_download_file_random_name(self):
        self.fetcher.fetch_chunks.return_value = iter([b'data'])

        with tempfile.TemporaryDirectory() as directory:
            self.assertTrue(self.toolkit.download_file('http://x.com/file.pdf', directory))
            file_names = os.listdir(directory)
            self.assertEqual(len(file_names), 1)
            name, extension = os.path.splitext(file_names[0])
            self.assertTrue(name.isdigit())
            self.assertEqual(extension, '.pdf')

    def test_download_file_http_error(self):
        self.fetcher.fetch_chunks.side_effect = requests.HTTPError('404')

        with tempfile.TemporaryDirectory() as directory:
            with self.assertRaises(requests.HTTPError):
                self.toolkit.download_file('http://x.com/missing.png', directory, 'pic')
            self.assertEqual(os.listdir(directory), [])

    def test_download_file_error_mid_stream(self):
        def broken_chunks(url):
            yield b'ab'
            raise requests.ConnectionError('connection reset')

        self.fetcher.fetch_chunks.side_effect = broken_chunks

        with tempfile.TemporaryDirectory() as directory:
            with self.assertRaises(requests.ConnectionError):
                self.toolkit.download_file('http://x.com/a.png', directory, 'pic')
            self.assertEqual(os.listdir(directory), [])

    def test_download_file_missing_directory(self):
        self.fetcher.fetch_chunks.return_value = iter([b'data'])

        with tempfile.TemporaryDirectory() as directory:
            missing_directory = os.path.join(directory, 'missing')
            with self.assertRaises(FileNotFoundError):
                self.toolkit.download_file('http://x.com/a.png', missing_directory, 'pic')
            self.assertEqual(os.listdir(directory), [])


if __name__ == '__main__':
    unittest.main()
