import pytest
from stockquotes.core import config

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment with no delays and no mock pages"""
    # Store original values
    original_use_mock = config.settings.USE_MOCK
    original_pre = config.settings.PRE_FETCH_DELAY
    original_post = config.settings.POST_FETCH_DELAY

    config.settings.USE_MOCK = False
    config.settings.PRE_FETCH_DELAY = 0
    config.settings.POST_FETCH_DELAY = 0

    yield

    # Restore original values
    config.settings.USE_MOCK = original_use_mock
    config.settings.PRE_FETCH_DELAY = original_pre
    config.settings.POST_FETCH_DELAY = original_post

@pytest.fixture
def quote_header_html():
    return """
    <html>
    <body>
        <div data-testid="quote-header">
            <h1>Apple Inc. (AAPL)</h1>
            <span data-testid="qsp-price">189.98</span>
            <span data-testid="qsp-price-change-percent">(+0.52%)</span>
        </div>
    </body>
    </html>
    """

@pytest.fixture
def price_anchor_html():
    return """
    <html>
    <body>
        <main>
            <div class="panel">
                <h1>Wipro Limited (WIPRO.BO)</h1>
                <div class="row">
                    <span data-testid="qsp-price">482.35</span>
                    <span data-testid="qsp-price-change-percent">(-1.12%)</span>
                </div>
            </div>
        </main>
    </body>
    </html>
    """

@pytest.fixture
def streamer_html():
    return """
    <html>
    <body>
        <section>
            <h1>S&amp;P 500 (^GSPC)</h1>
            <fin-streamer data-field="regularMarketPrice" value="5,021.84"></fin-streamer>
            <fin-streamer data-field="regularMarketChangePercent" value="+0.41%"></fin-streamer>
        </section>
    </body>
    </html>
    """
