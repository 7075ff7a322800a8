"""Pytest configuration and shared fixtures."""

import pytest

SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
  xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd"
  xmlns:content="http://purl.org/rss/1.0/modules/content/"
  xmlns:psc="http://podlove.org/simple-chapters">
  <channel>
    <title>Tech Talk Podcast</title>
    <link>https://techtalk.example.com</link>
    <language>en-US</language>
    <copyright>2024 Tech Team</copyright>
    <itunes:subtitle>The best tech podcast</itunes:subtitle>
    <itunes:author>Tech Team</itunes:author>
    <description>Weekly discussions about technology</description>
    <itunes:summary>Deep dive into tech topics</itunes:summary>
    <itunes:image href="https://techtalk.example.com/cover.jpg"/>
    <itunes:owner>
      <itunes:name>Jane Smith</itunes:name>
      <itunes:email>jane@techtalk.example.com</itunes:email>
    </itunes:owner>
    <itunes:category text="Technology">
      <itunes:category text="Tech News"/>
    </itunes:category>
    <ttl>60</ttl>
    <pubDate>Mon, 15 Jan 2024 12:00:00 GMT</pubDate>

    <item>
      <title>Cloud Computing</title>
      <guid>ep-122</guid>
      <description>Understanding the cloud</description>
      <pubDate>Mon, 08 Jan 2024 10:00:00 GMT</pubDate>
      <itunes:duration>38:15</itunes:duration>
      <enclosure url="https://techtalk.example.com/ep122.mp3" length="45678000" type="audio/mpeg"/>
    </item>

    <item>
      <title>AI Revolution</title>
      <guid>ep-123</guid>
      <itunes:subtitle>Discussing AI trends</itunes:subtitle>
      <description>Latest in AI technology</description>
      <itunes:summary>A deep dive into AI</itunes:summary>
      <content:encoded><![CDATA[<p>Full show notes here</p>]]></content:encoded>
      <pubDate>Mon, 15 Jan 2024 10:00:00 GMT</pubDate>
      <itunes:duration>45:30</itunes:duration>
      <itunes:image href="https://techtalk.example.com/ep123.jpg"/>
      <enclosure url="https://techtalk.example.com/ep123.mp3" length="54321000" type="audio/mpeg"/>
      <category>Technology</category>
      <category>AI</category>
      <psc:chapters version="1.2">
        <psc:chapter start="0:00" title="Introduction"/>
        <psc:chapter start="5:00" title="AI News"/>
        <psc:chapter start="30:00.250" title="Interview"/>
        <psc:chapter start="44:00" title="Outro"/>
      </psc:chapters>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def sample_feed_xml() -> str:
    """A complete podcast feed with two episodes."""
    return SAMPLE_FEED


@pytest.fixture
def sample_feed_file(tmp_path, sample_feed_xml: str):
    """The sample feed written to a temporary file."""
    path = tmp_path / "feed.xml"
    path.write_text(sample_feed_xml, encoding="utf-8")
    return path
