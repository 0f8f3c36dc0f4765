import pytest

FORECAST_XML = """<?xml version="1.0" encoding="utf-8"?>
<forecasts>
  <station id="1" valid="1">
    <name>Reykjavík</name>
    <atime>2014-01-20 12:00:00</atime>
    <err></err>
    <link>http://www.vedur.is/vedur/spar/stadaspar/hofudborgarsvaedid/#group=100&amp;station=1</link>
    <forecast>
      <ftime>2014-01-20 15:00:00</ftime>
      <F>5</F>
      <D>A</D>
      <T>1,5</T>
      <W>Skýjað</W>
    </forecast>
    <forecast>
      <ftime>2014-01-20 18:00:00</ftime>
      <F>4</F>
      <D>NA</D>
      <T>-0,5</T>
      <W>Léttskýjað</W>
    </forecast>
  </station>
</forecasts>
"""

OBSERVATION_XML = """<?xml version="1.0" encoding="utf-8"?>
<observations>
  <station id="1" valid="1">
    <name>Reykjavík</name>
    <time>2014-01-20 12:00:00</time>
    <err></err>
    <F>3</F>
    <D>SA</D>
    <T>2,1</T>
    <RH>85</RH>
    <R>0,2</R>
  </station>
  <station id="422" valid="1">
    <name>Akureyri</name>
    <time>2014-01-20 12:00:00</time>
    <err></err>
    <F>7</F>
    <T>-1,3</T>
  </station>
</observations>
"""

TEXT_XML = """<?xml version="1.0" encoding="utf-8"?>
<texts>
  <text id="5">
    <title>Veðurhorfur á landinu</title>
    <creation>2014-01-20 10:00:00</creation>
    <content>Norðaustan 5-10 m/s.<br/>Hiti 0 til 5 stig, kaldast norðan til.</content>
  </text>
  <text id="6">
    <title>Veðurhorfur á höfuðborgarsvæðinu</title>
    <creation>2014-01-20 10:00:00</creation>
    <content>Hæg breytileg átt, 2,5 m/s.</content>
  </text>
</texts>
"""

STATION_HTML = """
<html>
  <body>
    <table class="listtable">
      <tr><th>Stöð</th><th>Tegund</th></tr>
      <tr>
        <td><a href="/vedur/stodvar?s=reykjavik&amp;station=1" title="Reykjavík - veðurathugunarstöð">A</a></td>
        <td><a href="/vedur/stodvar?s=reykjavik&amp;station=1" title="Reykjavík - mönnuð stöð">M</a></td>
      </tr>
      <tr>
        <td><a href="/vedur/stodvar?s=egs&amp;station=571" title="Egilsstaðaflugvöllur - sjálfvirk stöð">A</a></td>
      </tr>
      <tr>
        <td><a href="/vedur/stodvar?s=kbkl&amp;station=6272" title="Kirkjubæjarklaustur - Stjórnarsandur -">A</a></td>
      </tr>
    </table>
    <table class="other">
      <tr><td><a href="/vedur/stodvar?station=99" title="Annað -">A</a></td></tr>
    </table>
  </body>
</html>
"""


class FakeTransport:
    """Returns canned bodies and records every requested URL."""

    def __init__(self, body="", error=None):
        self.body = body
        self.error = error
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture()
def make_transport():
    def _factory(body="", error=None):
        return FakeTransport(body=body, error=error)
    return _factory


@pytest.fixture()
def forecast_xml():
    return FORECAST_XML


@pytest.fixture()
def observation_xml():
    return OBSERVATION_XML


@pytest.fixture()
def text_xml():
    return TEXT_XML


@pytest.fixture()
def station_html():
    return STATION_HTML
