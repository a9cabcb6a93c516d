# tests/fixtures/api_responses.py
"""
Sample Alpha Vantage documents used across the test suite.
Shapes follow what the live API returns for each function.
"""

import json

EXCHANGE_RATE_RESPONSES = {
    "eur_usd": {
        "Realtime Currency Exchange Rate": {
            "1. From_Currency Code": "EUR",
            "2. From_Currency Name": "Euro",
            "3. To_Currency Code": "USD",
            "4. To_Currency Name": "United States Dollar",
            "5. Exchange Rate": "1.16665014",
            "6. Last Refreshed": "2018-06-23 10:27:49",
            "7. Time Zone": "UTC",
        }
    },

    "btc_usd_with_quotes": {
        "Realtime Currency Exchange Rate": {
            "1. From_Currency Code": "BTC",
            "2. From_Currency Name": "Bitcoin",
            "3. To_Currency Code": "USD",
            "4. To_Currency Name": "United States Dollar",
            "5. Exchange Rate": "64210.55000000",
            "6. Last Refreshed": "2024-05-02 08:15:01",
            "7. Time Zone": "UTC",
            "8. Bid Price": "64210.54000000",
            "9. Ask Price": "64210.55000000",
        }
    },

    "eastern_time_zone": {
        "Realtime Currency Exchange Rate": {
            "1. From_Currency Code": "EUR",
            "2. From_Currency Name": "Euro",
            "3. To_Currency Code": "USD",
            "4. To_Currency Name": "United States Dollar",
            "5. Exchange Rate": "1.16665014",
            "6. Last Refreshed": "2018-06-23 10:27:49",
            "7. Time Zone": "US/Eastern",
        }
    },

    "non_numeric_rate": {
        "Realtime Currency Exchange Rate": {
            "1. From_Currency Code": "EUR",
            "2. From_Currency Name": "Euro",
            "3. To_Currency Code": "USD",
            "4. To_Currency Name": "United States Dollar",
            "5. Exchange Rate": "N/A",
            "6. Last Refreshed": "2018-06-23 10:27:49",
            "7. Time Zone": "UTC",
        }
    },

    "missing_rate": {
        "Realtime Currency Exchange Rate": {
            "1. From_Currency Code": "EUR",
            "2. From_Currency Name": "Euro",
            "3. To_Currency Code": "USD",
            "4. To_Currency Name": "United States Dollar",
            "6. Last Refreshed": "2018-06-23 10:27:49",
            "7. Time Zone": "UTC",
        }
    },
}


def _point(open_, high, low, close, volume):
    return {
        "1. open": open_,
        "2. high": high,
        "3. low": low,
        "4. close": close,
        "5. volume": volume,
    }


TIME_SERIES_RESPONSES = {
    "intraday_5min": {
        "Meta Data": {
            "1. Information": "Intraday (5min) open, high, low, close prices and volume",
            "2. Symbol": "MSFT",
            "3. Last Refreshed": "2018-06-22 16:00:00",
            "4. Interval": "5min",
            "5. Output Size": "Compact",
            "6. Time Zone": "US/Eastern",
        },
        "Time Series (5min)": {
            "2018-06-22 16:00:00": _point("100.4500", "100.5200", "100.3700", "100.4100", "2753522"),
            "2018-06-22 15:55:00": _point("100.4100", "100.4800", "100.3600", "100.4500", "724931"),
            "2018-06-22 15:50:00": _point("100.3300", "100.4300", "100.3100", "100.4100", "416219"),
        },
    },

    "daily": {
        "Meta Data": {
            "1. Information": "Daily Prices (open, high, low, close) and Volumes",
            "2. Symbol": "MSFT",
            "3. Last Refreshed": "2018-06-22",
            "4. Output Size": "Compact",
            "5. Time Zone": "US/Eastern",
        },
        "Time Series (Daily)": {
            "2018-06-22": _point("100.4100", "100.9100", "99.9100", "100.4100", "38923137"),
            "2018-06-21": _point("102.0800", "102.4600", "100.4200", "101.1400", "28932615"),
        },
    },

    "weekly": {
        "Meta Data": {
            "1. Information": "Weekly Prices (open, high, low, close) and Volumes",
            "2. Symbol": "MSFT",
            "3. Last Refreshed": "2018-06-22",
            "4. Time Zone": "US/Eastern",
        },
        "Weekly Time Series": {
            "2018-06-15": _point("101.0100", "102.9900", "100.9000", "101.6700", "125836470"),
            "2018-06-22": _point("100.8900", "102.6900", "99.8700", "100.4100", "147396810"),
        },
    },

    "monthly": {
        "Meta Data": {
            "1. Information": "Monthly Prices (open, high, low, close) and Volumes",
            "2. Symbol": "MSFT",
            "3. Last Refreshed": "2018-06-22 16:00:00",
            "4. Time Zone": "US/Eastern",
        },
        "Monthly Time Series": {
            "2018-05-31": _point("93.2100", "99.9900", "92.4500", "98.8400", "450632081"),
            "2018-06-22": _point("99.2798", "102.6900", "98.4600", "100.4100", "416263390"),
        },
    },
}


ERROR_RESPONSES = {
    "invalid_call": {
        "Error Message": "Invalid API call. Please retry or visit the documentation "
        "(https://www.alphavantage.co/documentation/) for TIME_SERIES_DAILY."
    },

    "throttled": {
        "Note": "Thank you for using Alpha Vantage! Our standard API call frequency is "
        "5 calls per minute and 500 calls per day."
    },

    "rate_limit_information": {
        "Information": "We have detected your API key as demo and our standard API rate limit "
        "is 25 requests per day."
    },
}


def as_bytes(document) -> bytes:
    return json.dumps(document).encode("utf-8")
