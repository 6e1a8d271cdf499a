"""Mock live results page for demo mode and testing purposes."""

# Trimmed copy of the snooker.org live template layout. The h2h cell uses the
# same "player" class as the name cells, and the heading row carries gradeA
# without any player cells.
MOCK_LIVE_PAGE: str = """
<html>
<head><title>snooker.org - Live scores</title></head>
<body>
<div id="header">Live Scores</div>
<div class="livecontainer">
  <table class="display">
    <tr class="gradeA heading">
      <td colspan="6">Round 2 - Best of 9 frames</td>
    </tr>
    <tr class="gradeA oneonone">
      <td class="player"><a href="/res/index.asp?player=1">Judd Trump</a></td>
      <td class="first-score">3</td>
      <td class="last-score">2</td>
      <td class="player"><a href="/res/index.asp?player=2">Mark Selby</a></td>
      <td class="player h2h"><a href="/res/index.asp?template=25">H2H</a></td>
    </tr>
    <tr class="gradeA oneonone">
      <td class="player"><a href="/res/index.asp?player=3">Ronnie O'Sullivan</a></td>
      <td class="first-score">4</td>
      <td class="last-score">4</td>
      <td class="player"><a href="/res/index.asp?player=4">Mark Williams</a></td>
      <td class="player h2h"><a href="/res/index.asp?template=25">H2H</a></td>
    </tr>
    <tr class="gradeA oneonone">
      <td class="player"><a href="/res/index.asp?player=5">Zhao Xintong</a></td>
      <td class="first-score">0</td>
      <td class="last-score">1</td>
      <td class="player">TBA</td>
    </tr>
    <tr class="gradeB">
      <td class="player"><a href="/res/index.asp?player=6">Neil Robertson</a></td>
      <td class="first-score">5</td>
      <td class="last-score">1</td>
      <td class="player"><a href="/res/index.asp?player=7">Kyren Wilson</a></td>
    </tr>
  </table>
</div>
</body>
</html>
"""
