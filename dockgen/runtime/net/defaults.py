"""Constants for .NET projects: manifest patterns, version markers, template."""

import re

# Project files, highest priority first.
PROJECT_FILE_PATTERNS: tuple[str, ...] = ("*.csproj", "*.fsproj", "*.vbproj")

# SDK pin file at the project root.
GLOBAL_JSON = "global.json"

# <TargetFramework>net8.0</TargetFramework> -> "8.0"
TARGET_FRAMEWORK_RE = re.compile(r"<TargetFramework>net([\d.]+)</TargetFramework>")

# Multi-stage build: restore and publish with the SDK image, run on the
# smaller ASP.NET runtime image.
NET_TEMPLATE = """\
# Multi-stage Dockerfile for a .NET application

# -----------------
# 1. Build stage
# -----------------
ARG NET_VERSION={{ Version }}
ARG PORT={{ Port }}
FROM mcr.microsoft.com/dotnet/sdk:${NET_VERSION} AS build
WORKDIR /src

# Restore dependencies from the project files first to reuse the layer cache
COPY *.csproj *.fsproj *.vbproj ./
RUN dotnet restore

# Copy the rest of the sources and publish
COPY . .
RUN dotnet publish "{{ ProjectFile }}" -c Release -o {{ PublishDir }} --no-restore

# -----------------
# 2. Runtime stage
# -----------------
FROM mcr.microsoft.com/dotnet/aspnet:${NET_VERSION} AS final
WORKDIR /app

COPY --from=build {{ PublishDir }} .

ENV ASPNETCORE_URLS=http://+:${PORT:-8080}
ENV DOTNET_RUNNING_IN_CONTAINER=true
EXPOSE {{ Port }}

# The published assembly is named after the project file
ENTRYPOINT ["dotnet", "{{ ProjectFile }}.dll"]
"""
