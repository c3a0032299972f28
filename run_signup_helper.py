"""
Signup Helper - Razorpay Account Creation
=========================================

Opens a visible Chrome window on the Razorpay payment-links page so the
operator can sign up or log in by hand. Nothing is automated past clicking
the signup link; the browser stays open until ENTER is pressed.

    python run_signup_helper.py
"""

import sys
import logging

from selenium import webdriver
from selenium.webdriver.common.by import By
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.common.exceptions import NoSuchElementException, WebDriverException
from webdriver_manager.chrome import ChromeDriverManager

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SIGNUP_URL = "https://razorpay.com/payment-links"
SIGNUP_LINK_SELECTOR = 'a[href*="signup"]'


def create_driver() -> webdriver.Chrome:
    """Headful Chrome; the operator fills in the forms."""
    options = webdriver.ChromeOptions()
    options.add_argument("--start-maximized")
    options.add_argument("--disable-gpu")
    options.add_argument("--disable-dev-shm-usage")

    service = ChromeService(ChromeDriverManager().install())
    return webdriver.Chrome(service=service, options=options)


def open_signup(driver: webdriver.Chrome) -> None:
    driver.get(SIGNUP_URL)
    try:
        driver.find_element(By.CSS_SELECTOR, SIGNUP_LINK_SELECTOR).click()
    except NoSuchElementException:
        logger.info("No signup link found, staying on payment-links page")


def run():
    print("\n" + "=" * 60)
    print("   Review Relay - Razorpay Signup Helper")
    print("=" * 60)
    print("\n1. The browser will launch and open Razorpay.")
    print("2. Complete the signup/login process manually.")
    print("3. Press ENTER here when you are done.\n")

    driver = create_driver()
    try:
        open_signup(driver)
        input(">>> Press ENTER to close the browser... <<<\n")
    except KeyboardInterrupt:
        print("\nCancelled")
    except WebDriverException as e:
        logger.error(f"Browser error: {e}")
        return 1
    finally:
        driver.quit()
    return 0


if __name__ == "__main__":
    sys.exit(run())
