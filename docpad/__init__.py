"""DocPad: a small plain-text editor built around a document session controller."""
