"""Unit tests for the signup helper's page handling"""

from unittest.mock import MagicMock

from selenium.common.exceptions import NoSuchElementException

from run_signup_helper import SIGNUP_LINK_SELECTOR, SIGNUP_URL, open_signup


def test_open_signup_clicks_link():
    driver = MagicMock()

    open_signup(driver)

    driver.get.assert_called_once_with(SIGNUP_URL)
    driver.find_element.assert_called_once_with("css selector", SIGNUP_LINK_SELECTOR)
    driver.find_element.return_value.click.assert_called_once()


def test_open_signup_without_link():
    driver = MagicMock()
    driver.find_element.side_effect = NoSuchElementException("missing")

    open_signup(driver)

    driver.get.assert_called_once_with(SIGNUP_URL)
