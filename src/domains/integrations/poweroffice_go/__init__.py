"""PowerOfficeGo v2 accounting integration."""
