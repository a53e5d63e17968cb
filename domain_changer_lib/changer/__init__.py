"""
Top‑level package for the domain changer engine.

The public API consists of:
- DomainChanger (core), with ``parse_string`` / ``extract_old_domains``
  module level shortcuts
- the URL candidate tokenizer lives in ``domain_changer_lib.utils.tokenizer``
"""
