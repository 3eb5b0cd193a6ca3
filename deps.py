"""Centralized imports for the HTTP service layer (app)."""

# Standard library
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional

# External
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
