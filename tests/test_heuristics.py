import unittest

from linksentry.app.heuristics import BRAND_LOOKALIKES, evaluate_rules
from linksentry.app.validation import parse_url


def _indicators(url):
    return evaluate_rules(parse_url(url))


def _titles(url):
    return [i.title for i in _indicators(url)]


def _find(url, title):
    return [i for i in _indicators(url) if i.title == title]


class TestHeuristics(unittest.TestCase):
    def test_https_only(self):
        res = _indicators("https://example.com")
        self.assertEqual(len(res), 1)
        self.assertEqual(res[0].category, "safe")
        self.assertEqual(res[0].title, "HTTPS Detected")
        self.assertEqual(res[0].weight, 0)

    def test_http_warning(self):
        [ind] = _find("http://example.com", "No HTTPS Encryption")
        self.assertEqual(ind.category, "warning")
        self.assertEqual(ind.weight, 15)
        self.assertNotIn("HTTPS Detected", _titles("http://example.com"))

    def test_ip_literal_host(self):
        [ind] = _find("https://10.0.0.1/index.html", "IP Address Instead of Domain")
        self.assertEqual(ind.category, "danger")
        self.assertEqual(ind.weight, 25)

    def test_suspicious_tld_names_the_tld(self):
        [ind] = _find("https://example.ml", "Suspicious Top-Level Domain")
        self.assertEqual(ind.weight, 20)
        self.assertIn('".ml"', ind.description)

    def test_suspicious_tld_is_case_insensitive(self):
        self.assertIn("Suspicious Top-Level Domain", _titles("https://EXAMPLE.TK"))

    def test_subdomain_depth(self):
        [ind] = _find("https://a.b.c.example.com", "Excessive Subdomains")
        self.assertEqual(ind.description, "Found 3 subdomains, which may indicate obfuscation")
        self.assertNotIn("Excessive Subdomains", _titles("https://a.b.example.com"))

    def test_lookalike_one_hit_per_brand(self):
        res = _find("https://paypall.com", "Look-alike Domain Detected")
        self.assertEqual(len(res), 1)
        self.assertEqual(res[0].description, 'Domain contains "paypall" which mimics "paypal"')
        self.assertEqual(_find("https://paypal.com", "Look-alike Domain Detected"), [])

    def test_lookalike_several_brands(self):
        res = _find("https://paypa1-amaz0n.com", "Look-alike Domain Detected")
        self.assertEqual([i.weight for i in res], [30, 30])
        self.assertIn('"paypal"', res[0].description)
        self.assertIn('"amazon"', res[1].description)

    def test_brand_table_is_read_only(self):
        with self.assertRaises(TypeError):
            BRAND_LOOKALIKES["example"] = ("examp1e",)

    def test_shortener(self):
        [ind] = _find("https://bit.ly/abc", "URL Shortener Detected")
        self.assertEqual(ind.weight, 15)

    def test_keywords_weight_counts_every_match(self):
        [ind] = _find("https://example.com/login/verify/account/update", "Suspicious Keywords Found")
        self.assertEqual(ind.weight, 40)
        self.assertEqual(ind.description,
                         "Contains keywords often used in phishing: login, verify, account")

    def test_at_symbol(self):
        [ind] = _find("https://user@example.com", "Suspicious @ Symbol")
        self.assertEqual(ind.category, "danger")
        self.assertEqual(ind.weight, 25)

    def test_port(self):
        [ind] = _find("https://example.com:8080", "Unusual Port Number")
        self.assertEqual(ind.description, "Non-standard port 8080 detected")
        self.assertEqual(_find("https://example.com:443", "Unusual Port Number"), [])
        self.assertEqual(_find("http://example.com:80", "Unusual Port Number"), [])

    def test_long_url(self):
        self.assertIn("Unusually Long URL", _titles("https://example.com/" + "a" * 60))
        self.assertNotIn("Unusually Long URL", _titles("https://example.com/" + "a" * 55))

    def test_hyphens(self):
        [ind] = _find("https://my-very-odd-site.com", "Excessive Hyphens in Domain")
        self.assertEqual(ind.description, "Found 3 hyphens, which may indicate typosquatting")
        self.assertEqual(_find("https://my-odd-site.com", "Excessive Hyphens in Domain"), [])

    def test_non_ascii_host(self):
        [ind] = _find("https://exаmple.com", "Non-ASCII Characters Detected")
        self.assertEqual(ind.weight, 20)

    def test_ip_rule_ignores_scheme_case(self):
        for url in ("HTTP://1.2.3.4", "http://1.2.3.4"):
            [ind] = _find(url, "IP Address Instead of Domain")
            self.assertEqual(ind.weight, 25)
            self.assertEqual(sum(i.weight for i in _indicators(url)), 40)

    def test_rule_order_is_stable(self):
        self.assertEqual(
            _titles("http://192.168.1.1/secure-login@evil.com"),
            ["No HTTPS Encryption", "IP Address Instead of Domain",
             "Suspicious Keywords Found", "Suspicious @ Symbol"],
        )


if __name__ == '__main__':
    unittest.main()
