import pytest


@pytest.fixture
def mock_nkoj_problem_html():
    return """
    <html>
    <body>
        <div id="TdMainTitle"><span class="label">B</span> Sum of Array</div>
        <table id="TblLimits">
            <tr><td>时间限制 : 1000ms</td><td>空间限制 : 256MB</td></tr>
        </table>
        <div id="SampleInput-0"><pre>3
1 2 3</pre></div>
        <div id="SampleOutput-0"><pre>6</pre></div>
        <div id="SampleInput-1"><pre>1
5</pre></div>
        <div id="SampleOutput-1"><pre>5</pre></div>
    </body>
    </html>
    """


@pytest.fixture
def mock_nkoj_contest_html():
    return """
    <table class="table">
        <tr><td><a href="/en/Problem/Details?pid=5">A</a></td></tr>
        <tr><td><a href="/en/Problem/Details?pid=6">B</a></td></tr>
        <tr><td><a href="Status?cid=1&tid=2">Status</a></td></tr>
        <tr><td><a href="/en/Problem/Details?pid=5">A again</a></td></tr>
        <tr><td><a href="/en/Contest/Ranklist?cid=1">Ranklist</a></td></tr>
    </table>
    """
