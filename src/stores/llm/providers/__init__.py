from .GoogleProvider import GoogleProvider
