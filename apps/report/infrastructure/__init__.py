"""Report 인프라스트럭처 레이어."""
