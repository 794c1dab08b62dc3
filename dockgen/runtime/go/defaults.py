"""Constants for Go modules: manifest name, fallback binary, template."""

GO_MOD = "go.mod"

MANIFEST_PATTERNS: tuple[str, ...] = (GO_MOD,)

# Used when go.mod has no module directive
DEFAULT_BINARY_NAME = "app"

GO_TEMPLATE = """\
# Multi-stage Dockerfile for a Go application

# -----------------
# 1. Build stage
# -----------------
ARG GO_VERSION={{ Version }}
FROM golang:${GO_VERSION} AS build
WORKDIR /src

# Download modules first to reuse the layer cache
COPY go.mod go.sum* ./
RUN go mod download

COPY . .
RUN CGO_ENABLED=0 go build -trimpath -ldflags="-s -w" -o /out/{{ BinaryName }} .

# -----------------
# 2. Runtime stage
# -----------------
FROM gcr.io/distroless/static-debian12 AS final
WORKDIR /app

# module {{ Module }}
COPY --from=build /out/{{ BinaryName }} /app/{{ BinaryName }}

ENV PORT={{ Port }}
EXPOSE {{ Port }}

ENTRYPOINT ["/app/{{ BinaryName }}"]
"""
